# coding= utf-8
import logging

from brainf.errors import BrainfError, UnmatchedLoopEnd
from brainf.parser import (Parser, INCOMPLETE, POINTER_RIGHT, POINTER_LEFT,
                           INCREMENT, DECREMENT, OUTPUT, INPUT, LOOP_START,
                           LOOP_END)
from brainf.tape import Tape

log = logging.getLogger(__name__)

IDLE_MODE = 9900
CONTINUE_MODE = 9901


class ByteBuffer:
    """ Output that collects bytes until someone drains them. """
    def __init__(self):
        self.data = bytearray()

    def write_byte(self, value):
        self.data.append(value)

    def drain(self):
        ret = bytes(self.data)
        self.data = bytearray()
        return ret


class NoInput:
    """ An input that is always at end of stream. """
    def read_byte(self):
        return None


class BytesInput:
    """ Input served from a fixed string of bytes (text is encoded Latin-1). """
    def __init__(self, data=b''):
        if isinstance(data, str):
            data = data.encode('latin-1')
        self.data = bytearray(data)

    def read_byte(self):
        if not self.data:
            return None
        return self.data.pop(0)


class StreamInput:
    """
    Input read a byte at a time from a file-like object. A text stream has
    each character encoded UTF-8, and the bytes are served one per read.
    """
    def __init__(self, stream):
        self.stream = stream
        self.pending = bytearray()

    def read_byte(self):
        if not self.pending:
            data = self.stream.read(1)
            if not data:
                return None
            if isinstance(data, str):
                data = data.encode('utf-8')
            self.pending.extend(data)
        return self.pending.pop(0)


def execute(program, tape, start, stop, stdin, stdout):
    """
    Runs `program` from instruction `start` up to (not including) `stop`
    against `tape`. Bytes for `,` come from `stdin.read_byte()`, which
    returns None at end of stream (the cell is then left as it is); bytes
    from `.` go to `stdout.write_byte()`.

    Every loop in [start, stop) must already have its jump resolved.
    """
    cursor = start
    while cursor < stop:
        op = program[cursor]
        tag = op.tag
        if tag == POINTER_RIGHT:
            tape.move(1)
        elif tag == POINTER_LEFT:
            tape.move(-1)
        elif tag == INCREMENT:
            tape.increment()
        elif tag == DECREMENT:
            tape.decrement()
        elif tag == OUTPUT:
            stdout.write_byte(tape.read())
        elif tag == INPUT:
            value = stdin.read_byte()
            if value is not None:
                tape.write(value)
        elif tag == LOOP_START:
            if tape.is_zero:
                cursor = op.jump
        elif tag == LOOP_END:
            if not tape.is_zero:
                cursor = op.jump
        else:
            raise BrainfError('unknown instruction: %s' % tag)
        cursor += 1
    return cursor


class Machine:
    """
    A brainf machine: one tape, one program, and the bookkeeping needed to
    feed it a line at a time.

    `resume_point` is the index of the first instruction not yet run. Each
    complete statement runs from there to the end of the program, after
    which `resume_point` moves to the end. A statement that fails is never
    run again: its leftover instructions are skipped, not retried.
    """
    def __init__(self, stdin=None, stdout=None):
        self.tape = Tape()
        self.parser = Parser()
        self.program = self.parser.program
        self.resume_point = 0
        self.mode = IDLE_MODE
        self.last_error = None
        self.stdin = NoInput() if stdin is None else stdin
        self.stdout = ByteBuffer() if stdout is None else stdout

    def eval(self, text=''):
        """
        Evaluates `text` one line at a time and returns the machine's
        response: anything printed, followed by ' ok' once a statement has
        run, ' ...' while a loop is still open, or ' ? ' and the reason a
        statement failed.
        """
        lines = text.splitlines() or ['']
        return ''.join(self.eval_line(line) for line in lines)

    def eval_line(self, line):
        self.last_error = None
        try:
            status = self.parser.feed(line)
        except UnmatchedLoopEnd as e:
            self._abandon_statement(e)
            return ' ? ' + str(e)

        if status == INCOMPLETE:
            self.mode = CONTINUE_MODE
            return ' ...'

        self.mode = IDLE_MODE
        start, stop = self.resume_point, len(self.program)
        log.debug('running instructions %d to %d', start, stop)
        try:
            execute(self.program, self.tape, start, stop,
                    self.stdin, self.stdout)
        except BrainfError as e:
            self._abandon_statement(e)
            return self._drain_output() + ' ? ' + str(e)

        self.resume_point = stop
        return self._drain_output() + ' ok'

    def _abandon_statement(self, error):
        log.debug('statement abandoned at instruction %d: %s',
                  len(self.program), error)
        self.last_error = error
        self.parser.reset()
        self.resume_point = len(self.program)
        self.mode = IDLE_MODE

    def _drain_output(self):
        drain = getattr(self.stdout, 'drain', None)
        if drain is None:
            return ''
        return drain().decode('latin-1')
