# coding= utf-8
"""
The tape: a row of byte cells and a pointer to the current one.

The tape only ever grows to the right. Cells hold values 0-255 and wrap
around when incremented past 255 or decremented below 0.
"""

from brainf.errors import OutOfBounds

INITIAL_TAPE_SIZE = 1


class Tape:
    """ Byte cells plus a pointer. The pointer always addresses a real cell. """
    def __init__(self, size=INITIAL_TAPE_SIZE):
        self.cells = [0] * max(size, 1)
        self.pointer = 0

    def __len__(self):
        return len(self.cells)

    def move(self, delta):
        """
        Moves the pointer by `delta` cells. Moving past the right end grows
        the tape with zeroed cells; moving left of the first cell raises
        :exc:`brainf.errors.OutOfBounds` and leaves the pointer alone.
        """
        target = self.pointer + delta
        if target < 0:
            raise OutOfBounds(self.pointer, delta)
        if target >= len(self.cells):
            self.cells.extend([0] * (target - len(self.cells) + 1))
        self.pointer = target

    def read(self):
        return self.cells[self.pointer]

    def write(self, value):
        self.cells[self.pointer] = value % 256

    def increment(self):
        self.write(self.read() + 1)

    def decrement(self):
        self.write(self.read() - 1)

    @property
    def is_zero(self):
        return self.cells[self.pointer] == 0

    def __str__(self):
        return ''.join(' [%d]' % cell if i == self.pointer else ' %d' % cell
                       for i, cell in enumerate(self.cells))
