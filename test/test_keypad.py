#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from pychip8.keypad import Keypad


class TestKeypad(unittest.TestCase):
    def setUp(self):
        self.keypad = Keypad()

    def test_keypad_init(self):
        self.assertEqual((False,) * 16, self.keypad.snapshot())
        self.assertIsNone(self.keypad.first_pressed())

    def test_keypad_set_key(self):
        self.keypad.set_key(0xF, True)
        self.assertTrue(self.keypad.is_key_down(0xF))
        self.keypad.set_key(0xF, False)
        self.assertFalse(self.keypad.is_key_down(0xF))

    def test_keypad_out_of_range(self):
        self.assertRaises(ValueError, self.keypad.set_key, 0x10, True)
        # Registers can hold values with no matching key
        self.assertFalse(self.keypad.is_key_down(0xFF))

    def test_keypad_first_pressed(self):
        self.keypad.set_key(0xB, True)
        self.keypad.set_key(0x4, True)
        self.assertEqual(0x4, self.keypad.first_pressed())
        self.keypad.set_key(0x4, False)
        self.assertEqual(0xB, self.keypad.first_pressed())

    def test_keypad_clear(self):
        self.keypad.set_key(0x1, True)
        self.keypad.clear()
        self.assertEqual((False,) * 16, self.keypad.snapshot())
