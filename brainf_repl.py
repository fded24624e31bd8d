import argparse
import logging
import readline
import sys

import brainf

INPUT_PROMPT = '👉  '
CONTINUE_PROMPT = '💦  '
BYTE_PROMPT = '🍴  '
STATE_PROMPT = '🙏 '
ERROR_PROMPT = '🚨  '
QUIT_COMMAND = '?'

log = logging.getLogger('brainf_repl')


class PromptInput:
    """
    Supplies bytes for `,` by asking at the terminal. A line is read only
    when the bytes of the previous one are used up; an empty line, or end
    of file, counts as end of input for that read.
    """
    def __init__(self, prompt=BYTE_PROMPT):
        self.prompt = prompt
        self.pending = bytearray()

    def read_byte(self):
        if not self.pending:
            try:
                line = input(self.prompt)
            except EOFError:
                return None
            self.pending.extend(line.encode('utf-8'))
        if not self.pending:
            return None
        return self.pending.pop(0)


def print_response(machine, response):
    if machine.last_error is not None:
        output = response[:-len(' ? %s' % machine.last_error)]
    else:
        output = response[:-len(' ok')]
    if output:
        print(output)
    if machine.last_error is not None:
        print(ERROR_PROMPT + str(machine.last_error))


def brainf_repl(machine, quiet=False):
    print('Starting BrainF REPL (type "%s" to quit)' % QUIT_COMMAND)

    prompt = INPUT_PROMPT
    line = input(prompt)
    while line.strip() != QUIT_COMMAND:
        response = machine.eval_line(line)
        if machine.mode is brainf.CONTINUE_MODE:
            prompt = CONTINUE_PROMPT
        else:
            prompt = INPUT_PROMPT
            print_response(machine, response)
            if not quiet:
                print(STATE_PROMPT + str(machine.tape))
        line = input(prompt)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='brainf', description='Interactive brainf interpreter.')
    parser.add_argument('-i', '--input', metavar='FILE',
                        help='read bytes for "," from FILE instead of asking')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='do not print the tape after each statement')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log debugging information to stderr')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s')
    if args.verbose:
        logging.getLogger('brainf').setLevel(logging.DEBUG)

    stream = None
    if args.input:
        try:
            stream = open(args.input, 'rb')
        except OSError as e:
            log.error('cannot read input file: %s', e)
            return 1
    if stream is not None:
        stdin = brainf.StreamInput(stream)
    else:
        stdin = PromptInput()

    try:
        brainf_repl(brainf.Machine(stdin=stdin), quiet=args.quiet)
    except EOFError:
        print()  # perfectly acceptable
    except OSError as e:
        log.error('lost the terminal: %s', e)
        return 1
    finally:
        if stream is not None:
            stream.close()
    return 0


if __name__ == '__main__':
    sys.exit(main())
