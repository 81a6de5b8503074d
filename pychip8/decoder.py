#!/usr/bin/env python3

"""
Instruction Decoder

Turns a raw 16-bit instruction word into an Instruction: a tag naming one of
the CHIP-8 operations, plus every operand field the word could carry.  Words
that match no instruction raise UnknownOpcode, so anything returned by
decode() is guaranteed to be executable.

Decoding is pure.  It never looks at, or changes, CPU state, so it is also used
on its own for disassembly in the debugger.

Operand naming follows the usual CHIP-8 references:
    n    = nibble (lowest 4 bits)
    kk   = byte (lowest 8 bits)
    nnn  = address (lowest 12 bits)
    x/y  = register (0-15), second and third nibbles
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from collections import namedtuple
from .errors import UnknownOpcode

Instruction = namedtuple("Instruction", ["op", "opcode", "vx", "vy", "byte", "addr", "nibble"])

# Instruction tags
CLS = "CLS"                  # 00E0
RET = "RET"                  # 00EE
JP_ADDR = "JP_ADDR"          # 1nnn
CALL_ADDR = "CALL_ADDR"      # 2nnn
SE_VX_BYTE = "SE_VX_BYTE"    # 3xkk
SNE_VX_BYTE = "SNE_VX_BYTE"  # 4xkk
SE_VX_VY = "SE_VX_VY"        # 5xy0
LD_VX_BYTE = "LD_VX_BYTE"    # 6xkk
ADD_VX_BYTE = "ADD_VX_BYTE"  # 7xkk
LD_VX_VY = "LD_VX_VY"        # 8xy0
OR_VX_VY = "OR_VX_VY"        # 8xy1
AND_VX_VY = "AND_VX_VY"      # 8xy2
XOR_VX_VY = "XOR_VX_VY"      # 8xy3
ADD_VX_VY = "ADD_VX_VY"      # 8xy4
SUB_VX_VY = "SUB_VX_VY"      # 8xy5
SHR_VX = "SHR_VX"            # 8xy6
SUBN_VX_VY = "SUBN_VX_VY"    # 8xy7
SHL_VX = "SHL_VX"            # 8xyE
SNE_VX_VY = "SNE_VX_VY"      # 9xy0
LD_I_ADDR = "LD_I_ADDR"      # Annn
JP_V0_ADDR = "JP_V0_ADDR"    # Bnnn
RND_VX_BYTE = "RND_VX_BYTE"  # Cxkk
DRW = "DRW"                  # Dxyn
SKP_VX = "SKP_VX"            # Ex9E
SKNP_VX = "SKNP_VX"          # ExA1
LD_VX_DT = "LD_VX_DT"        # Fx07
LD_VX_K = "LD_VX_K"          # Fx0A
LD_DT_VX = "LD_DT_VX"        # Fx15
LD_ST_VX = "LD_ST_VX"        # Fx18
ADD_I_VX = "ADD_I_VX"        # Fx1E
LD_F_VX = "LD_F_VX"          # Fx29
LD_B_VX = "LD_B_VX"          # Fx33
LD_I_VX = "LD_I_VX"          # Fx55
LD_VX_I = "LD_VX_I"          # Fx65

# Families whose first nibble alone selects the instruction
FIRST_NIBBLE_OPS = {
    0x1: JP_ADDR,
    0x2: CALL_ADDR,
    0x3: SE_VX_BYTE,
    0x4: SNE_VX_BYTE,
    0x5: SE_VX_VY,
    0x6: LD_VX_BYTE,
    0x7: ADD_VX_BYTE,
    0x9: SNE_VX_VY,
    0xA: LD_I_ADDR,
    0xB: JP_V0_ADDR,
    0xC: RND_VX_BYTE,
    0xD: DRW
}

# 0nnn family, keyed by the last nibble
SYSTEM_OPS = {
    0x0: CLS,
    0xE: RET
}

# 8xyn family, keyed by the last nibble
ALU_OPS = {
    0x0: LD_VX_VY,
    0x1: OR_VX_VY,
    0x2: AND_VX_VY,
    0x3: XOR_VX_VY,
    0x4: ADD_VX_VY,
    0x5: SUB_VX_VY,
    0x6: SHR_VX,
    0x7: SUBN_VX_VY,
    0xE: SHL_VX
}

# Ex__ family, keyed by the low byte
KEY_OPS = {
    0x9E: SKP_VX,
    0xA1: SKNP_VX
}

# Fx__ family, keyed by the low byte
MISC_OPS = {
    0x07: LD_VX_DT,
    0x0A: LD_VX_K,
    0x15: LD_DT_VX,
    0x18: LD_ST_VX,
    0x1E: ADD_I_VX,
    0x29: LD_F_VX,
    0x33: LD_B_VX,
    0x55: LD_I_VX,
    0x65: LD_VX_I
}

# Assembly text for each tag, filled in from the operand fields by disassemble()
MNEMONICS = {
    CLS:         "CLS",
    RET:         "RET",
    JP_ADDR:     "JP 0x{addr:03x}",
    CALL_ADDR:   "CALL 0x{addr:03x}",
    SE_VX_BYTE:  "SE V{vx:01x}, 0x{byte:02x}",
    SNE_VX_BYTE: "SNE V{vx:01x}, 0x{byte:02x}",
    SE_VX_VY:    "SE V{vx:01x}, V{vy:01x}",
    LD_VX_BYTE:  "LD V{vx:01x}, 0x{byte:02x}",
    ADD_VX_BYTE: "ADD V{vx:01x}, 0x{byte:02x}",
    LD_VX_VY:    "LD V{vx:01x}, V{vy:01x}",
    OR_VX_VY:    "OR V{vx:01x}, V{vy:01x}",
    AND_VX_VY:   "AND V{vx:01x}, V{vy:01x}",
    XOR_VX_VY:   "XOR V{vx:01x}, V{vy:01x}",
    ADD_VX_VY:   "ADD V{vx:01x}, V{vy:01x}",
    SUB_VX_VY:   "SUB V{vx:01x}, V{vy:01x}",
    SHR_VX:      "SHR V{vx:01x}",
    SUBN_VX_VY:  "SUBN V{vx:01x}, V{vy:01x}",
    SHL_VX:      "SHL V{vx:01x}",
    SNE_VX_VY:   "SNE V{vx:01x}, V{vy:01x}",
    LD_I_ADDR:   "LD I, 0x{addr:03x}",
    JP_V0_ADDR:  "JP V0, 0x{addr:03x}",
    RND_VX_BYTE: "RND V{vx:01x}, 0x{byte:02x}",
    DRW:         "DRW V{vx:01x}, V{vy:01x}, 0x{nibble:01x}",
    SKP_VX:      "SKP V{vx:01x}",
    SKNP_VX:     "SKNP V{vx:01x}",
    LD_VX_DT:    "LD V{vx:01x}, DT",
    LD_VX_K:     "LD V{vx:01x}, K",
    LD_DT_VX:    "LD DT, V{vx:01x}",
    LD_ST_VX:    "LD ST, V{vx:01x}",
    ADD_I_VX:    "ADD I, V{vx:01x}",
    LD_F_VX:     "LD F, V{vx:01x}",
    LD_B_VX:     "LD B, V{vx:01x}",
    LD_I_VX:     "LD [I], V{vx:01x}",
    LD_VX_I:     "LD V{vx:01x}, [I]"
}


def decode(opcode):
    family = (opcode & 0xF000) >> 12
    nibble = opcode & 0xF
    byte = opcode & 0xFF

    if family == 0x0:
        op = SYSTEM_OPS.get(nibble)
    elif family == 0x8:
        op = ALU_OPS.get(nibble)
    elif family == 0xE:
        op = KEY_OPS.get(byte)
    elif family == 0xF:
        op = MISC_OPS.get(byte)
    else:
        op = FIRST_NIBBLE_OPS[family]

    if op is None:
        raise UnknownOpcode(opcode)

    return Instruction(
        op=op,
        opcode=opcode,
        vx=(opcode & 0xF00) >> 8,
        vy=(opcode & 0xF0) >> 4,
        byte=byte,
        addr=opcode & 0xFFF,
        nibble=nibble
    )


def disassemble(instruction):
    return MNEMONICS[instruction.op].format(**instruction._asdict())
