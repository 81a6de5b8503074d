#!/usr/bin/env python3

"""
Keypad State

Holds the 16 hexadecimal keys as simple pressed/released flags.  Only the host
changes these (through an Inputs plugin, or directly via CPU.set_key), and only
between CPU steps.  The CPU reads them for the SKP/SKNP skips, and to resolve
a pending key wait.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import NUM_KEYS


class Keypad:
    def __init__(self):
        self.keys = [False] * NUM_KEYS

    def set_key(self, key, pressed):
        if not 0 <= key < NUM_KEYS:
            raise ValueError("Key 0x{:x} is outside the keypad range 0x0-0xf".format(key))

        self.keys[key] = bool(pressed)

    def is_key_down(self, key):
        # Vx can hold any byte, but only the low 16 values have a key
        return key < NUM_KEYS and self.keys[key]

    def first_pressed(self):
        for key, pressed in enumerate(self.keys):
            if pressed:
                return key

        return None

    def clear(self):
        for key in range(NUM_KEYS):
            self.keys[key] = False

    def snapshot(self):
        return tuple(self.keys)
