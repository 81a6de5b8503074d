#!/usr/bin/env python3

"""
Interpreter Errors

Every fault the interpreter can raise while loading or stepping derives from
Chip8Error, so a host can catch the whole family in one place.  None of these
are fatal: the interpreter state is left as it was before the failing
instruction began, and it can be inspected or reset afterwards.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class Chip8Error(Exception):
    pass


class UnknownOpcode(Chip8Error):
    def __init__(self, word):
        super().__init__("Opcode 0x{:04x} is not a CHIP-8 instruction".format(word))
        self.word = word


class StackError(Chip8Error):
    pass


class StackOverflow(StackError):
    def __init__(self):
        super().__init__("Stack overflow")


class StackUnderflow(StackError):
    def __init__(self):
        super().__init__("Stack underflow")


class OutOfBounds(Chip8Error):
    def __init__(self, address):
        super().__init__("Memory access at 0x{:04x} is out of bounds".format(address))
        self.address = address


class RomTooLarge(Chip8Error):
    def __init__(self, size, limit):
        super().__init__("ROM is {} bytes, but only {} bytes can be loaded".format(size, limit))
        self.size = size
        self.limit = limit
