#!/usr/bin/env python3

"""
Stack Emulator

It is unnecessary to include the CPU call stack as part of system RAM, because
there is no specified location for it, and programs cannot address it.  This
means we can simply wrap a list to fully (and quickly) emulate it.

The stack pointer is the number of return addresses held, which is also the
index of the next free slot.  Zero means the stack is empty.  Both overflow
and underflow are reported as errors before anything is changed.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .errors import StackOverflow, StackUnderflow


class Stack:
    def __init__(self, size):
        self.items = []
        self.size = size

    def push(self, item):
        # Fetching the stack size with 'len' should be immediate, so no slow loop
        self.check_push()
        self.items.append(item)

    def pop(self):
        try:
            return self.items.pop()
        except IndexError:
            raise StackUnderflow() from None

    def check_push(self):
        if len(self.items) >= self.size:
            raise StackOverflow()

    @property
    def sp(self):
        return len(self.items)

    def clear(self):
        self.items.clear()

    def get_items(self):
        # For debugging
        return tuple(self.items)
