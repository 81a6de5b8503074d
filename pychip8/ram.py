#!/usr/bin/env python3

"""
RAM Emulator

Supports reading and writing of blocks of memory or individual bytes, plus
fast zeroing.  Every access is bounds-checked, so a stray index register or
program counter raises OutOfBounds rather than wrapping or growing the
buffer.  Block operations check the whole range before touching anything.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .errors import OutOfBounds


class RAM:
    def __init__(self):
        self.resize(0)

    def resize(self, mem_size):
        self.mem = memoryview(bytearray(b"\x00" * mem_size))
        self.mem_top = mem_size - 1
        self.mem_size = mem_size

    def read(self, location):
        self.check_bounds(location)
        return self.mem[location]

    def read_block(self, location, size=1):
        self.check_range(location, size)
        return self.mem[location:location + size]

    def write(self, location, byte):
        self.check_bounds(location)
        self.mem[location] = byte

    def write_block(self, location, block):
        block_size = len(block)
        self.check_range(location, block_size)
        self.mem[location:location + block_size] = block

    def check_bounds(self, location):
        if location < 0 or location > self.mem_top:
            raise OutOfBounds(location)

    def check_range(self, location, size):
        if size <= 0:
            return

        # Report the first offending address, which is the start if that is already outside
        self.check_bounds(location)
        self.check_bounds(location + size - 1)

    def zero_block(self, offset, size):
        self.check_range(offset, size)

        for i in range(offset, offset + size):
            self.mem[i] = 0x00

    def clear(self):
        # We could reallocate the entire array instead
        self.zero_block(0, self.mem_size)
