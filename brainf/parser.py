# coding= utf-8
"""
Turns lines of brainf source into instructions, one line at a time.

The :class:`Parser` is stateful in much the same way the machine is: each call
to :meth:`Parser.feed` appends to the same :class:`Program`, and a loop opened
on one line may be closed on any later line. Until it is, the parser reports
the program as incomplete and the machine must not run it.

Any character outside the eight instruction characters is a comment and is
silently skipped, so `+++ add three` parses to three increments.
"""
from brainf.errors import BrainfError, UnmatchedLoopEnd

POINTER_RIGHT = 'POINTER_RIGHT'
POINTER_LEFT = 'POINTER_LEFT'
INCREMENT = 'INCREMENT'
DECREMENT = 'DECREMENT'
OUTPUT = 'OUTPUT'
INPUT = 'INPUT'
LOOP_START = 'LOOP_START'
LOOP_END = 'LOOP_END'

INSTRUCTION_CHARS = {
    '>': POINTER_RIGHT,
    '<': POINTER_LEFT,
    '+': INCREMENT,
    '-': DECREMENT,
    '.': OUTPUT,
    ',': INPUT,
    '[': LOOP_START,
    ']': LOOP_END,
}

COMPLETE = 'COMPLETE'
INCOMPLETE = 'INCOMPLETE'


class Instruction:
    """
    One instruction. Loop instructions carry `jump`, the index of their
    partner, which stays None on a loop start until its loop end is parsed.
    """
    __slots__ = ('tag', 'jump')

    def __init__(self, tag, jump=None):
        self.tag = tag
        self.jump = jump

    def __eq__(self, other):
        if not isinstance(other, Instruction):
            return NotImplemented
        return (self.tag, self.jump) == (other.tag, other.jump)

    def __repr__(self):
        if self.jump is not None:
            return 'Instruction(%s, jump=%d)' % (self.tag, self.jump)
        return 'Instruction(%s)' % self.tag


class Program:
    """
    The append-only list of every instruction parsed so far, including the
    jump targets of every loop whose end has been seen.
    """
    def __init__(self):
        self.instructions = []

    def __len__(self):
        return len(self.instructions)

    def __getitem__(self, index):
        return self.instructions[index]

    def append(self, instruction):
        self.instructions.append(instruction)
        return len(self.instructions) - 1

    def resolve_loop(self, start, end):
        """ Links the loop start at `start` with the loop end at `end`. """
        if self.instructions[start].tag != LOOP_START:
            raise BrainfError('no loop start at %d' % start)
        if self.instructions[end].tag != LOOP_END:
            raise BrainfError('no loop end at %d' % end)
        self.instructions[start].jump = end
        self.instructions[end].jump = start

    @property
    def jump_table(self):
        return dict((i, op.jump) for i, op in enumerate(self.instructions)
                    if op.jump is not None)


class Parser:
    """
    Incremental bracket-matching parser.

    `open_loops` holds the indices of loop starts still waiting for their
    loop end; it is what carries an unfinished statement from one line to
    the next.
    """
    def __init__(self, program=None):
        self.program = Program() if program is None else program
        self.open_loops = []

    @property
    def depth(self):
        return len(self.open_loops)

    @property
    def is_complete(self):
        return not self.open_loops

    def feed(self, line):
        """
        Parses one line into the program. Returns :data:`COMPLETE` if every
        loop opened so far has been closed, or :data:`INCOMPLETE` if more
        lines are needed.

        A loop end with no open loop raises :exc:`UnmatchedLoopEnd`; the rest
        of the line is dropped but whatever came before it stays appended.
        """
        for column, char in enumerate(line):
            tag = INSTRUCTION_CHARS.get(char)
            if tag is None:
                continue
            if tag == LOOP_END and not self.open_loops:
                raise UnmatchedLoopEnd(column)

            index = self.program.append(Instruction(tag))
            if tag == LOOP_START:
                self.open_loops.append(index)
            elif tag == LOOP_END:
                self.program.resolve_loop(self.open_loops.pop(), index)

        if self.open_loops:
            return INCOMPLETE
        return COMPLETE

    def reset(self):
        """ Forgets any open loops. Parsed instructions are kept. """
        self.open_loops = []
