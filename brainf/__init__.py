# coding= utf-8
"""
Implements a brainf machine: a byte tape and a growing program that are fed
one line of source at a time, in a read-eval-print loop, until the user
quits.

Usage should be as simple as:
    >>> import brainf
    >>> m = brainf.Machine()
    >>> m.eval("+++")
    ' ok'
    >>> str(m.tape)
    ' [3]'

Each line is run as soon as every loop it opens has been closed. A line that
leaves a loop open is held back (the response is ' ...') and run together
with the lines that follow, once the loop is closed:
    >>> m.eval("[>+<-")
    ' ...'
    >>> m.eval("]")
    ' ok'
    >>> str(m.tape)
    ' [0] 3'

Errors do not stop the machine; they are reported and the statement that
caused them is dropped:
    >>> m.eval("<<")
    ' ? pointer moved below cell 0'
"""
from brainf.errors import BrainfError, UnmatchedLoopEnd, OutOfBounds
from brainf.parser import Parser, Program, Instruction, COMPLETE, INCOMPLETE
from brainf.tape import Tape
from brainf.machine import (Machine, execute, IDLE_MODE, CONTINUE_MODE,
                            ByteBuffer, NoInput, BytesInput, StreamInput)
