#!/usr/bin/env python3

"""
Framebuffer Emulator

Pixels are written here, and are usually only drawn to the actual display (the
host rendering system) at 60Hz.  The CPU never talks to a renderer directly:
it only draws into this buffer, and any attached renderer is told about each
pixel that changes.  With no renderer attached, the buffer still works, which
is what the tests and headless hosts rely on.

Programs for this system cannot write directly into video RAM.  Instead,
sprites are drawn to the screen.  The sprite's start position wraps around the
display, but the sprite itself is clipped at the right and bottom edges.

By default, a set sprite bit forces the pixel on, flagging a collision if it
was already on.  Classic XOR drawing, where a set bit toggles the pixel off
again, can be selected with 'xor_sprites'.  Collisions are reported the same
way in both modes.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_NAME, VID_WIDTH, VID_HEIGHT
from .ram import RAM

SPRITE_WIDTH = 8
PIXEL_ON = 0xFF
PIXEL_OFF = 0x00


class Framebuffer():
    def __init__(self, renderer=None, xor_sprites=False):
        self.renderer = renderer
        self.xor_sprites = xor_sprites
        self.vid_width = 0
        self.vid_height = 0
        self.vid_size = 0
        self.plane = RAM()
        self.changed = False
        self.resize_vid(VID_WIDTH, VID_HEIGHT)
        self.report_perf()

    def resize_vid(self, vid_width, vid_height):
        self.vid_width = vid_width
        self.vid_height = vid_height
        self.vid_size = self.vid_width * self.vid_height
        self.plane.resize(self.vid_size)
        self.changed = True

        if self.renderer is not None:
            self.renderer.set_resolution(vid_width, vid_height)  # Update screen resolution

    def clear(self):
        self.plane.clear()
        self.changed = True

        if self.renderer is not None:
            for y in range(self.vid_height):
                for x in range(self.vid_width):
                    self._render_pixel(x, y)

    def plot_pixel(self, x, y):
        # Returns flagging any collision, or None if the pixel lies off the display and was dropped
        if x >= self.vid_width or y >= self.vid_height:
            return None

        vram_loc = y * self.vid_width + x
        pixel = self.plane.read(vram_loc)
        collision = (pixel != PIXEL_OFF)

        if self.xor_sprites:
            new_pixel = pixel ^ PIXEL_ON
        else:
            new_pixel = PIXEL_ON

        if new_pixel != pixel:
            self.plane.write(vram_loc, new_pixel)
            self.changed = True
            self._render_pixel(x, y)

        return collision

    def draw_sprite(self, x, y, rows):
        # Main sprite drawing routine.  'rows' holds one byte per sprite line, most significant bit leftmost.
        # Returns True if any set sprite bit landed on a pixel which was already on.
        x_pos = x % self.vid_width
        y_pos = y % self.vid_height
        collided = False

        for row, spr_data in enumerate(rows):
            scr_y = y_pos + row

            if scr_y >= self.vid_height:
                break  # Everything further down is clipped too

            for col in range(SPRITE_WIDTH):
                if spr_data & (0x80 >> col):
                    if self.plot_pixel(x_pos + col, scr_y):
                        # Don't stop drawing.  Set the flag, and never unset it for this sprite.
                        collided = True

        return collided

    def is_pixel_on(self, x, y):
        return self.plane.read(y * self.vid_width + x) != PIXEL_OFF

    def snapshot(self):
        # Read-only copy, row-major
        mem = self.plane.mem
        width = self.vid_width

        return tuple(
            tuple(mem[y * width + x] != PIXEL_OFF for x in range(width)) for y in range(self.vid_height)
        )

    def pop_changed(self):
        # Report whether anything was drawn since the last call, and start tracking afresh
        changed = self.changed
        self.changed = False
        return changed

    def _render_pixel(self, x, y):
        # Render the pixel to the display
        if self.renderer is not None:
            self.renderer.set_pixel(x, y, int(self.plane.read(x + y * self.vid_width) != PIXEL_OFF))

    def refresh_display(self, content_changed=False):
        if self.renderer is not None:
            self.renderer.refresh_display(content_changed)

    def get_vid_size(self):
        return self.vid_width, self.vid_height

    def report_perf(self, fps=0, ops=0):
        if self.renderer is not None:
            self.renderer.set_title("{} - {} FPS, {} OPS".format(APP_NAME, fps, ops))
