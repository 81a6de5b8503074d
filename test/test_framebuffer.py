#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from pychip8.framebuffer import Framebuffer
from pychip8.renderers.r_null import Renderer


class RecordingRenderer(Renderer):
    def __init__(self):
        self.pixels = {}
        self.refreshes = []
        super().__init__()

    def set_pixel(self, x, y, colour):
        self.pixels[(x, y)] = colour

    def refresh_display(self, content_changed=False):
        self.refreshes.append(content_changed)


class TestFrameBuffer(unittest.TestCase):
    def setUp(self):
        self.renderer = RecordingRenderer()
        self.framebuffer = Framebuffer(self.renderer)
        self.framebuffer_xor = Framebuffer(Renderer(), xor_sprites=True)

    def test_framebuffer_init(self):
        self.assertEqual((64, 32), self.framebuffer.get_vid_size())
        self.assertEqual((64, 32), (self.renderer.width, self.renderer.height))
        self.assertEqual(64 * 32, self.framebuffer.plane.mem_size)
        self.assertTrue(self.renderer.title.endswith("0 FPS, 0 OPS"))
        self.assertEqual(((False,) * 64,) * 32, self.framebuffer.snapshot())

    def test_framebuffer_works_without_renderer(self):
        fb = Framebuffer()
        self.assertFalse(fb.draw_sprite(0, 0, b"\x80"))
        self.assertTrue(fb.is_pixel_on(0, 0))
        fb.clear()
        fb.refresh_display(True)
        self.assertFalse(fb.is_pixel_on(0, 0))

    def test_framebuffer_plot(self):
        fb = self.framebuffer
        self.assertFalse(fb.plot_pixel(0, 0))
        self.assertTrue(fb.is_pixel_on(0, 0))
        self.assertEqual(1, self.renderer.pixels[(0, 0)])
        # Second plot collides, and the pixel stays on
        self.assertTrue(fb.plot_pixel(0, 0))
        self.assertTrue(fb.is_pixel_on(0, 0))
        # Off the display, so dropped
        self.assertIsNone(fb.plot_pixel(64, 0))
        self.assertIsNone(fb.plot_pixel(0, 32))

    def test_framebuffer_plot_xor(self):
        fb = self.framebuffer_xor
        self.assertFalse(fb.plot_pixel(5, 5))
        self.assertTrue(fb.is_pixel_on(5, 5))
        self.assertTrue(fb.plot_pixel(5, 5))
        self.assertFalse(fb.is_pixel_on(5, 5))

    def test_framebuffer_draw_sprite(self):
        fb = self.framebuffer
        self.assertFalse(fb.draw_sprite(2, 1, b"\xA0\x40"))
        snapshot = fb.snapshot()
        self.assertEqual((False, False, True, False, True, False), snapshot[1][:6])
        self.assertEqual((False, False, False, True, False, False), snapshot[2][:6])
        # Overlap on one pixel only is still a collision
        self.assertTrue(fb.draw_sprite(3, 2, b"\x80"))
        self.assertFalse(fb.draw_sprite(10, 10, b"\x80"))

    def test_framebuffer_draw_sprite_wraps_start(self):
        fb = self.framebuffer
        fb.draw_sprite(64 + 3, 32 + 4, b"\x80")
        self.assertTrue(fb.is_pixel_on(3, 4))
        fb.draw_sprite(0xFF, 0xFF, b"\x80")  # 255 % 64 = 63, 255 % 32 = 31
        self.assertTrue(fb.is_pixel_on(63, 31))

    def test_framebuffer_draw_sprite_clips(self):
        fb = self.framebuffer
        fb.draw_sprite(62, 30, b"\xFF\xFF\xFF\xFF")
        snapshot = fb.snapshot()
        self.assertEqual((True, True), snapshot[30][62:])
        self.assertEqual((True, True), snapshot[31][62:])
        self.assertEqual((False,) * 62, snapshot[30][:62])
        self.assertEqual((False,) * 64, snapshot[0])
        self.assertEqual((False,) * 64, snapshot[1])

    def test_framebuffer_draw_sprite_xor(self):
        fb = self.framebuffer_xor
        self.assertFalse(fb.draw_sprite(0, 0, b"\xFF"))
        self.assertTrue(fb.draw_sprite(0, 0, b"\xFF"))
        self.assertEqual(((False,) * 64,) * 32, fb.snapshot())

    def test_framebuffer_clear(self):
        fb = self.framebuffer
        fb.draw_sprite(0, 0, b"\xFF")
        fb.clear()
        self.assertEqual(((False,) * 64,) * 32, fb.snapshot())
        self.assertEqual(0, self.renderer.pixels[(0, 0)])
        self.assertEqual(64 * 32, len(self.renderer.pixels))

    def test_framebuffer_changed(self):
        fb = self.framebuffer
        fb.pop_changed()
        self.assertFalse(fb.pop_changed())
        fb.plot_pixel(1, 1)
        self.assertTrue(fb.pop_changed())
        self.assertFalse(fb.pop_changed())
        fb.plot_pixel(1, 1)  # Already on, nothing changes
        self.assertFalse(fb.pop_changed())
        fb.clear()
        self.assertTrue(fb.pop_changed())

    def test_framebuffer_refresh(self):
        self.framebuffer.refresh_display(True)
        self.framebuffer.refresh_display()
        self.assertEqual([True, False], self.renderer.refreshes)
