#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to start the interpreter, replacing args with a
dictionary of options.  This can be done via the Terminal or GUI.

All options must be supplied.  Defaults can be specified with a 'None'.

To embed the interpreter without any host frontend, use the CPU class
directly: load() a ROM, then call step() at whatever rate suits.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_INTRO, APP_COPYRIGHT
from .cpu import CPU, StepOutcome, Registers, STATE_RUNNING, STATE_WAITING_FOR_KEY
from .debugger import Debugger
from .emulator import Emulator
from .errors import Chip8Error, UnknownOpcode, StackError, StackOverflow, StackUnderflow, OutOfBounds, RomTooLarge
from .framebuffer import Framebuffer
from .hostio import Loader
from .keypad import Keypad
from .ram import RAM
from .stack import Stack


class StartupError(Exception):
    pass


def main(args):
    print("".join((APP_INTRO, APP_COPYRIGHT)))

    opt_renderer = args["renderer"]
    auto_select_renderer = opt_renderer is None  # If necessary, try PyGame first, then Curses.

    # flake8: noqa: F401
    if auto_select_renderer or opt_renderer == "pygame":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import pygame
        except ImportError:
            if auto_select_renderer:
                opt_renderer = "curses"
            else:
                raise StartupError(
                    "PyGame does not appear to be installed."
                )
        else:
            opt_renderer = "pygame"
            from .inputs.i_pygame import Inputs
            from .renderers.r_pygame import Renderer

    if opt_renderer == "curses":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import curses
        except ImportError:
            if auto_select_renderer:
                raise StartupError(
                    "Neither PyGame nor Curses (or Windows-Curses) appear to be installed."
                )

            raise StartupError(
                "Curses (or Windows-Curses) does not appear to be installed."
            )
        else:
            from .inputs.i_curses import Inputs
            from .renderers.r_curses import Renderer

    if opt_renderer == "null":
        # pylint: disable=import-outside-toplevel
        from .inputs.i_null import Inputs
        from .renderers.r_null import Renderer

    # Read the ROM binary first, so a missing file doesn't leave the terminal or a window in a strange state
    rom = Loader().load_binary(args["filename"])

    # Set up a new rendering system, and the framebuffer which feeds it
    renderer = Renderer(
        scale=args["scale"],
        pygame_palette=args["pygame_palette"],
        curses_cursor_mode=args["curses_cursor_mode"],
        smoothing=args["smoothing"]
    )

    framebuffer = Framebuffer(renderer, xor_sprites=bool(args["xor_sprites"]))
    keypad = Keypad()

    # Set up host inputs, and link to the chosen rendering module in case it provides inputs too
    inputs = Inputs(args["keymap"], renderer, keypad)

    # Set up debugger and live output if necessary
    debugger = Debugger()
    debugger.set_live(args["debug"])

    # Create a new CPU, plug it into the rest of the system, and put the ROM at the default address
    cpu = CPU(framebuffer=framebuffer, keypad=keypad, debugger=debugger)
    emulator = Emulator(cpu, inputs, clock_speed=args["clock_speed"])

    try:
        cpu.load(rom)
        emulator.run()
    except Chip8Error as err:
        crash_report = "Emulation halted.\n\n{}Debug info:\n{}\n\n{}".format(
            APP_INTRO, debugger.debug(cpu, "???", verbose=True), err
        )
    else:
        crash_report = None
    finally:
        # The CPU has quit, so shut down the rendering framework.  __del__ cannot be relied upon when using PyPy
        inputs.shutdown()
        renderer.shutdown()

    # Only report once the renderer has given the terminal back
    if crash_report is not None:
        print(crash_report)
        return 1

    return 0
