#!/usr/bin/env python3

"""
Host Loop

Drives a CPU in real time.  The CPU itself has no idea of wall-clock time: it
only advances when step() is called.  This loop decides how often that
happens, polls the Inputs plugin and refreshes the display at 60Hz, and keeps
a rough count of frames and operations per second for the title bar.

Alterations should be checked against the 'operations per second' report, to
ensure any changes are an improvement.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from time import perf_counter
from .constants import DEFAULT_CLOCK_SPEED, DISPLAY_FREQ

DISPLAY_INTERVAL = 1.0 / DISPLAY_FREQ


class Emulator:
    def __init__(self, cpu, inputs, clock_speed=None):
        self.cpu = cpu
        self.framebuffer = cpu.framebuffer
        self.inputs = inputs

        if clock_speed is None:
            clock_speed = DEFAULT_CLOCK_SPEED

        # User can specify 0 for infinite
        self.core_interval = None if clock_speed <= 0 else 1.0 / clock_speed

        # Display-related vars
        self.display_dirty = True
        self.next_display_update_time = 0

        # Performance-related vars
        self.perf_counter_fps = 0
        self.perf_counter_ops = 0
        self.next_perf_report_time = 0

    def run(self):
        cpu = self.cpu

        while True:
            this_time = perf_counter()  # Do this first for maximum precision

            # Performance counters
            if this_time >= self.next_perf_report_time:
                self.next_perf_report_time = int(this_time) + 1.0
                # Reporting the performance should be done before a refresh, as refreshing will likely show the report
                self.framebuffer.report_perf(self.perf_counter_fps, self.perf_counter_ops)
                self.perf_counter_ops = 0
                self.perf_counter_fps = 0

            # Prevent unnecessary display rendering in excess of host frame rate
            if this_time >= self.next_display_update_time:
                if self.inputs.process_messages():  # Process inputs at 60Hz too, to avoid slowdown
                    return
                self.next_display_update_time = this_time + DISPLAY_INTERVAL
                self.refresh_framebuffer()
                self.perf_counter_fps += 1

            outcome = cpu.step()

            if outcome.display_changed:
                self.display_dirty = True

            if outcome.instruction is not None:
                self.perf_counter_ops += 1

            if self.core_interval is not None:
                # Wait for next CPU step.  Do this last for maximum precision (takes into account time spent on this
                # instruction)
                next_time = this_time + self.core_interval

                while perf_counter() < next_time:  # Unfortunately we have to do this to get the timing right
                    pass

    def refresh_framebuffer(self):
        # Render pending delta screen updates.  Should be called whenever there will be a pause, a quit, or the
        # display refresh interval expires.
        self.framebuffer.refresh_display(self.display_dirty)
        self.display_dirty = False
