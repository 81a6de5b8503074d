#!/usr/bin/env python3

"""
CPU Emulator (CHIP-8)

Like a real computer, this is where most of the processing happens.  The CPU
owns the registers, timers and call stack, and drives RAM, the Framebuffer and
the Keypad on behalf of the running program.

The host calls step() as often as it likes.  Each call fetches, decodes and
executes at most one instruction, then ticks both timers once, so the host's
calling rate sets both the emulated clock speed and the timer rate.

LD Vx, K (wait for a keypress) does not rewind the program counter and spin.
Instead, the CPU enters a waiting state.  While waiting, step() only checks
the keypad (and ticks the timers), until a key is down.  The lowest-numbered
key held is then written into Vx, and normal execution resumes on the
following step.

Any fault raises a Chip8Error subclass.  Instructions validate everything
they need before changing anything, and step() restores the program counter,
so the machine is left exactly as it was before the faulting instruction.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from collections import namedtuple
from random import randint
from . import decoder
from .constants import (
    MEM_SIZE, PROGRAM_START, PROGRAM_MAX_SIZE, FONT_START, FONT_GLYPH_SIZE, SYSTEM_FONT, NUM_REGISTERS, STACK_DEPTH
)
from .debugger import Debugger
from .errors import Chip8Error, RomTooLarge
from .framebuffer import Framebuffer
from .keypad import Keypad
from .ram import RAM
from .stack import Stack

CPU_ENDIAN = "big"  # CHIP-8 is big-endian

STATE_RUNNING = "running"
STATE_WAITING_FOR_KEY = "waiting_for_key"

# Returned by every step, so the host can decide whether to redraw or sound the buzzer
StepOutcome = namedtuple("StepOutcome", ["instruction", "display_changed", "delay_timer", "sound_timer", "waiting"])

# Copy of the programmer-visible state, for debugging and testing
Registers = namedtuple("Registers", ["pc", "i", "sp", "v", "dt", "st", "stack"])


def random_byte():
    return randint(0, 0xFF)


class CPU:
    def __init__(self, ram=None, stack=None, framebuffer=None, keypad=None, debugger=None, random_source=None):
        self.ram = RAM() if ram is None else ram
        self.stack = Stack(STACK_DEPTH) if stack is None else stack
        self.framebuffer = Framebuffer() if framebuffer is None else framebuffer
        self.keypad = Keypad() if keypad is None else keypad
        self.debugger = Debugger() if debugger is None else debugger
        self.random_source = random_byte if random_source is None else random_source

        # Map each decoded instruction tag onto its handler
        self.instructions = {
            decoder.CLS:         self._00E0,
            decoder.RET:         self._00EE,
            decoder.JP_ADDR:     self._1nnn,
            decoder.CALL_ADDR:   self._2nnn,
            decoder.SE_VX_BYTE:  self._3xkk,
            decoder.SNE_VX_BYTE: self._4xkk,
            decoder.SE_VX_VY:    self._5xy0,
            decoder.LD_VX_BYTE:  self._6xkk,
            decoder.ADD_VX_BYTE: self._7xkk,
            decoder.LD_VX_VY:    self._8xy0,
            decoder.OR_VX_VY:    self._8xy1,
            decoder.AND_VX_VY:   self._8xy2,
            decoder.XOR_VX_VY:   self._8xy3,
            decoder.ADD_VX_VY:   self._8xy4,
            decoder.SUB_VX_VY:   self._8xy5,
            decoder.SHR_VX:      self._8xy6,
            decoder.SUBN_VX_VY:  self._8xy7,
            decoder.SHL_VX:      self._8xyE,
            decoder.SNE_VX_VY:   self._9xy0,
            decoder.LD_I_ADDR:   self._Annn,
            decoder.JP_V0_ADDR:  self._Bnnn,
            decoder.RND_VX_BYTE: self._Cxkk,
            decoder.DRW:         self._Dxyn,
            decoder.SKP_VX:      self._Ex9E,
            decoder.SKNP_VX:     self._ExA1,
            decoder.LD_VX_DT:    self._Fx07,
            decoder.LD_VX_K:     self._Fx0A,
            decoder.LD_DT_VX:    self._Fx15,
            decoder.LD_ST_VX:    self._Fx18,
            decoder.ADD_I_VX:    self._Fx1E,
            decoder.LD_F_VX:     self._Fx29,
            decoder.LD_B_VX:     self._Fx33,
            decoder.LD_I_VX:     self._Fx55,
            decoder.LD_VX_I:     self._Fx65
        }

        self.reset()

    def reset(self):
        # Reallocating wipes RAM, then the font goes back in its reserved area
        self.ram.resize(MEM_SIZE)
        self.ram.write_block(FONT_START, SYSTEM_FONT)

        # Initialise registers
        self.v = memoryview(bytearray(NUM_REGISTERS))  # Bytearrays are mutable, and values are kept to 8 bits
        self.i = 0  # Index register (16 bits wide, only addresses up to 0xFFF are valid when dereferenced)
        self.stack.clear()

        # Initialise timers
        self.dt = 0  # Delay timer
        self.st = 0  # Sound timer

        # Initialise program counter and the record of the current opcode
        self.pc = PROGRAM_START
        self.debug_pc = PROGRAM_START
        self.opcode = 0

        self.framebuffer.clear()
        self.keypad.clear()

        self.state = STATE_RUNNING
        self.wait_register = None

    def load(self, data):
        size = len(data)

        if size > PROGRAM_MAX_SIZE:
            raise RomTooLarge(size, PROGRAM_MAX_SIZE)

        self.ram.write_block(PROGRAM_START, data)

    def step(self):
        instruction = None

        if self.state == STATE_WAITING_FOR_KEY:
            key = self.keypad.first_pressed()

            if key is not None:
                self.v[self.wait_register] = key
                self.state = STATE_RUNNING
                self.wait_register = None
        else:
            # Keep track of the program counter before altering it, for debugging and for rolling back on a fault
            pc = self.pc
            self.debug_pc = pc  # Do this all the time in case there is a crash
            self.opcode = self.fetch()

            try:
                # Program counter updates after fetch (and technically before decode), but before execute
                self.inc_pc()
                instruction = decoder.decode(self.opcode)

                if self.debugger.is_live():
                    self.debug(instruction)

                self.instructions[instruction.op](instruction)
            except Chip8Error:
                self.pc = pc
                raise

        self.tick_timers()

        return StepOutcome(
            instruction=instruction,
            display_changed=self.framebuffer.pop_changed(),
            delay_timer=self.dt,
            sound_timer=self.st,
            waiting=(self.state == STATE_WAITING_FOR_KEY)
        )

    def fetch(self):
        return int.from_bytes(self.ram.read_block(self.pc, 2), CPU_ENDIAN, signed=False)

    def inc_pc(self):
        self.pc += 2

    def tick_timers(self):
        if self.dt > 0:
            self.dt -= 1

        if self.st > 0:
            self.st -= 1

    def set_key(self, key, pressed):
        self.keypad.set_key(key, pressed)

    def is_waiting(self):
        return self.state == STATE_WAITING_FOR_KEY

    def get_state(self):
        return self.state, self.wait_register

    def framebuffer_snapshot(self):
        return self.framebuffer.snapshot()

    def register_snapshot(self):
        return Registers(
            pc=self.pc,
            i=self.i,
            sp=self.stack.sp,
            v=tuple(self.v),
            dt=self.dt,
            st=self.st,
            stack=self.stack.get_items()
        )

    def debug(self, instruction):
        self.debugger.output(self, decoder.disassemble(instruction))

    def _00E0(self, ins):  # CLS
        self.framebuffer.clear()

    def _00EE(self, ins):  # RET
        self.pc = self.stack.pop()

    def _1nnn(self, ins):  # JP addr
        self.pc = ins.addr

    def _2nnn(self, ins):  # CALL addr
        self.stack.push(self.pc)
        self.pc = ins.addr

    def _skip(self):
        self.inc_pc()

    def _3xkk(self, ins):  # SE Vx, byte
        if self.v[ins.vx] == ins.byte:
            self._skip()

    def _4xkk(self, ins):  # SNE Vx, byte
        if self.v[ins.vx] != ins.byte:
            self._skip()

    def _5xy0(self, ins):  # SE Vx, Vy
        if self.v[ins.vx] == self.v[ins.vy]:
            self._skip()

    def _6xkk(self, ins):  # LD Vx, byte
        self.v[ins.vx] = ins.byte

    def _7xkk(self, ins):  # ADD Vx, byte
        # No carry flag for this one
        self.v[ins.vx] = (self.v[ins.vx] + ins.byte) & 0xFF

    def _8xy0(self, ins):  # LD Vx, Vy
        self.v[ins.vx] = self.v[ins.vy]

    def _8xy1(self, ins):  # OR Vx, Vy
        self.v[ins.vx] |= self.v[ins.vy]

    def _8xy2(self, ins):  # AND Vx, Vy
        self.v[ins.vx] &= self.v[ins.vy]

    def _8xy3(self, ins):  # XOR Vx, Vy
        self.v[ins.vx] ^= self.v[ins.vy]

    # Flags are always worked out from the operands first, and Vf is written last.  Vf may be one of the operands, or
    # the destination, and the flag must win.

    def _8xy4(self, ins):  # ADD Vx, Vy
        val = self.v[ins.vx] + self.v[ins.vy]
        self.v[ins.vx] = val & 0xFF
        self.v[0xF] = int(val > 0xFF)  # Vf is set when carrying

    def _8xy5(self, ins):  # SUB Vx, Vy
        vx_val = self.v[ins.vx]
        vy_val = self.v[ins.vy]
        self.v[ins.vx] = (vx_val - vy_val) & 0xFF
        self.v[0xF] = int(vx_val > vy_val)  # Vf is set when NOT borrowing

    def _8xy6(self, ins):  # SHR Vx
        val = self.v[ins.vx]
        self.v[ins.vx] = val >> 1
        self.v[0xF] = val & 1  # Bit shifted out

    def _8xy7(self, ins):  # SUBN Vx, Vy
        vx_val = self.v[ins.vx]
        vy_val = self.v[ins.vy]
        self.v[ins.vx] = (vy_val - vx_val) & 0xFF
        self.v[0xF] = int(vy_val > vx_val)

    def _8xyE(self, ins):  # SHL Vx
        val = self.v[ins.vx]
        self.v[ins.vx] = (val << 1) & 0xFF
        self.v[0xF] = val >> 7  # Bit shifted out

    def _9xy0(self, ins):  # SNE Vx, Vy
        if self.v[ins.vx] != self.v[ins.vy]:
            self._skip()

    def _Annn(self, ins):  # LD I, addr
        self.i = ins.addr

    def _Bnnn(self, ins):  # JP V0, addr
        # Not masked.  Landing past the end of RAM is reported on the next fetch.
        self.pc = ins.addr + self.v[0x0]

    def _Cxkk(self, ins):  # RND Vx, byte
        # The ANDing here is intentional.  This is not a random number between 0 and 'byte' inclusive.
        self.v[ins.vx] = self.random_source() & ins.byte

    def _Dxyn(self, ins):  # DRW Vx, Vy, nibble
        # Reading the whole sprite first means a bad index register faults before anything is drawn
        rows = self.ram.read_block(self.i, ins.nibble)
        collided = self.framebuffer.draw_sprite(self.v[ins.vx], self.v[ins.vy], rows)
        self.v[0xF] = int(collided)

    def _Ex9E(self, ins):  # SKP Vx
        if self.keypad.is_key_down(self.v[ins.vx]):
            self._skip()

    def _ExA1(self, ins):  # SKNP Vx
        if not self.keypad.is_key_down(self.v[ins.vx]):
            self._skip()

    def _Fx07(self, ins):  # LD Vx, DT
        self.v[ins.vx] = self.dt

    def _Fx0A(self, ins):  # LD Vx, K
        # The program counter has already moved past this instruction, and stays there.  The key is collected by
        # step() once one is held.
        self.state = STATE_WAITING_FOR_KEY
        self.wait_register = ins.vx

    def _Fx15(self, ins):  # LD DT, Vx
        self.dt = self.v[ins.vx]

    def _Fx18(self, ins):  # LD ST, Vx
        self.st = self.v[ins.vx]

    def _Fx1E(self, ins):  # ADD I, Vx
        self.i = (self.i + self.v[ins.vx]) & 0xFFFF

    def _Fx29(self, ins):  # LD F, Vx
        self.i = FONT_START + FONT_GLYPH_SIZE * self.v[ins.vx]

    def _Fx33(self, ins):  # LD B, Vx
        val = self.v[ins.vx]
        # Most-significant digit first
        self.ram.write_block(self.i, bytes((val // 100, (val // 10) % 10, val % 10)))

    def _Fx55(self, ins):  # LD [I], Vx
        # Ensure with +1s that the final register is copied
        self.ram.write_block(self.i, self.v[:ins.vx + 1])

    def _Fx65(self, ins):  # LD Vx, [I]
        self.v[:ins.vx + 1] = self.ram.read_block(self.i, ins.vx + 1)
