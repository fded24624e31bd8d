# coding= utf-8
"""
Errors raised by the brainf core. Every one of them is recoverable: the
:class:`brainf.machine.Machine` reports it and carries on with the next line.
"""


class BrainfError(Exception): pass


class UnmatchedLoopEnd(BrainfError):
    def __init__(self, column):
        super().__init__("unbalanced ']' input")
        self.column = column


class OutOfBounds(BrainfError):
    def __init__(self, pointer, delta):
        super().__init__('pointer moved below cell 0')
        self.pointer = pointer
        self.delta = delta
