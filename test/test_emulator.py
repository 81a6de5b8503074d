#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from pychip8.constants import DEFAULT_KEYMAP
from pychip8.cpu import CPU
from pychip8.emulator import Emulator
from pychip8.framebuffer import Framebuffer
from pychip8.inputs.i_null import Inputs
from pychip8.keypad import Keypad
from pychip8.renderers.r_null import Renderer


class ScriptedInputs(Inputs):
    # Presses key 0x7 on the first poll, and asks to quit on the second
    def __init__(self, keymap, renderer, keypad):
        self.polls = 0
        super().__init__(keymap, renderer, keypad)

    def process_messages(self):
        self.polls += 1

        if self.polls == 1:
            self.keypad.set_key(0x7, True)
            return False

        return True


class TestEmulator(unittest.TestCase):
    def setUp(self):
        self.renderer = Renderer()
        self.keypad = Keypad()
        self.cpu = CPU(framebuffer=Framebuffer(self.renderer), keypad=self.keypad)
        self.inputs = ScriptedInputs(DEFAULT_KEYMAP, self.renderer, self.keypad)

    def test_emulator_run_until_quit(self):
        # LD V2, K; then loop forever
        self.cpu.load(b"\xF2\x0A\x12\x02")
        emulator = Emulator(self.cpu, self.inputs, clock_speed=0)
        emulator.run()
        self.assertEqual(2, self.inputs.polls)
        self.assertEqual(0x7, self.cpu.v[0x2])
        self.assertEqual(0x202, self.cpu.pc)
        self.assertFalse(self.cpu.is_waiting())

    def test_emulator_clock_speed(self):
        self.assertIsNone(Emulator(self.cpu, self.inputs, clock_speed=0).core_interval)
        self.assertEqual(1.0 / 60, Emulator(self.cpu, self.inputs).core_interval)
        self.assertEqual(0.5, Emulator(self.cpu, self.inputs, clock_speed=2).core_interval)
