#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from pychip8 import decoder
from pychip8.decoder import decode, disassemble
from pychip8.errors import UnknownOpcode


class TestDecoder(unittest.TestCase):
    def test_decoder_fields(self):
        instruction = decode(0xD12A)
        self.assertEqual(decoder.DRW, instruction.op)
        self.assertEqual(0xD12A, instruction.opcode)
        self.assertEqual(0x1, instruction.vx)
        self.assertEqual(0x2, instruction.vy)
        self.assertEqual(0xA, instruction.nibble)
        self.assertEqual(0x2A, instruction.byte)
        self.assertEqual(0x12A, instruction.addr)

    def test_decoder_every_family(self):
        expected = {
            0x00E0: decoder.CLS,
            0x00EE: decoder.RET,
            0x1234: decoder.JP_ADDR,
            0x2345: decoder.CALL_ADDR,
            0x3456: decoder.SE_VX_BYTE,
            0x4567: decoder.SNE_VX_BYTE,
            0x5670: decoder.SE_VX_VY,
            0x6789: decoder.LD_VX_BYTE,
            0x789A: decoder.ADD_VX_BYTE,
            0x8120: decoder.LD_VX_VY,
            0x8121: decoder.OR_VX_VY,
            0x8122: decoder.AND_VX_VY,
            0x8123: decoder.XOR_VX_VY,
            0x8124: decoder.ADD_VX_VY,
            0x8125: decoder.SUB_VX_VY,
            0x8126: decoder.SHR_VX,
            0x8127: decoder.SUBN_VX_VY,
            0x812E: decoder.SHL_VX,
            0x9AB0: decoder.SNE_VX_VY,
            0xABCD: decoder.LD_I_ADDR,
            0xBCDE: decoder.JP_V0_ADDR,
            0xCDEF: decoder.RND_VX_BYTE,
            0xD015: decoder.DRW,
            0xE19E: decoder.SKP_VX,
            0xE1A1: decoder.SKNP_VX,
            0xF107: decoder.LD_VX_DT,
            0xF10A: decoder.LD_VX_K,
            0xF115: decoder.LD_DT_VX,
            0xF118: decoder.LD_ST_VX,
            0xF11E: decoder.ADD_I_VX,
            0xF129: decoder.LD_F_VX,
            0xF133: decoder.LD_B_VX,
            0xF155: decoder.LD_I_VX,
            0xF165: decoder.LD_VX_I
        }

        for opcode, op in expected.items():
            self.assertEqual(op, decode(opcode).op, "0x{:04x}".format(opcode))

        # Every handler tag is reachable
        self.assertEqual(len(decoder.MNEMONICS), len(set(expected.values())))

    def test_decoder_system_family_uses_last_nibble(self):
        self.assertEqual(decoder.CLS, decode(0x0000).op)
        self.assertEqual(decoder.RET, decode(0x012E).op)

    def test_decoder_unknown(self):
        for opcode in 0x0001, 0x00E1, 0x00FF, 0x8008, 0x800D, 0x800F, 0xE09F, 0xE0A2, 0xF100, 0xF1FF, 0xFFFF:
            with self.assertRaises(UnknownOpcode) as ctx:
                decode(opcode)

            self.assertEqual(opcode, ctx.exception.word)

    def test_decoder_every_word(self):
        # Decoding is total: every word either decodes or raises UnknownOpcode
        known = 0

        for opcode in range(0x10000):
            try:
                decode(opcode)
            except UnknownOpcode:
                continue

            known += 1

        # 0nnn: 2 per 256 low bytes * 16 middle nibbles, 12 whole families, 8xyn: 9 of 16, Ex: 2, Fx: 9
        self.assertEqual(
            2 * 0x100 + 12 * 0x1000 + 9 * 0x100 + 2 * 0x10 + 9 * 0x10,
            known
        )

    def test_decoder_disassemble(self):
        self.assertEqual("CLS", disassemble(decode(0x00E0)))
        self.assertEqual("JP 0x2a4", disassemble(decode(0x12A4)))
        self.assertEqual("ADD V1, 0x02", disassemble(decode(0x7102)))
        self.assertEqual("SUBN Va, Vb", disassemble(decode(0x8AB7)))
        self.assertEqual("DRW V0, V1, 0x5", disassemble(decode(0xD015)))
        self.assertEqual("LD [I], Vf", disassemble(decode(0xFF55)))
        self.assertEqual("LD V3, K", disassemble(decode(0xF30A)))
