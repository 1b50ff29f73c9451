from __future__ import annotations

import random
import unittest

from smartflow.config import ViewConfig
from smartflow.model import ViewTransform
from smartflow.viewport import ViewportController


class TestViewportContract(unittest.TestCase):
    def test_initial_state_is_identity(self) -> None:
        vp = ViewportController()
        self.assertEqual(vp.state, ViewTransform(0.0, 0.0, 1.0))
        self.assertFalse(vp.dragging)

    def test_drag_pans_relative_to_grab_point(self) -> None:
        vp = ViewportController()
        self.assertTrue(vp.begin_drag(10, 20))
        vp.continue_drag(50, 70)
        self.assertEqual((vp.state.pan_x, vp.state.pan_y), (40, 50))
        vp.end_drag()

        # Second drag continues from the current pan, no jump.
        self.assertTrue(vp.begin_drag(100, 100))
        vp.continue_drag(100, 100)
        self.assertEqual((vp.state.pan_x, vp.state.pan_y), (40, 50))
        vp.continue_drag(110, 90)
        self.assertEqual((vp.state.pan_x, vp.state.pan_y), (50, 40))

    def test_drag_on_interactive_target_is_ignored(self) -> None:
        vp = ViewportController()
        for target in ("button", "input", "node", "NODE"):
            self.assertFalse(vp.begin_drag(0, 0, target=target))
            vp.continue_drag(300, 300)
            self.assertEqual(vp.state, ViewTransform())
        self.assertTrue(vp.begin_drag(0, 0, target="canvas"))

    def test_second_pointer_down_is_ignored(self) -> None:
        vp = ViewportController()
        vp.begin_drag(0, 0)
        self.assertFalse(vp.begin_drag(500, 500))
        vp.continue_drag(5, 5)
        self.assertEqual((vp.state.pan_x, vp.state.pan_y), (5, 5))

    def test_invalid_sequences_are_no_ops(self) -> None:
        vp = ViewportController()
        vp.end_drag()
        vp.end_drag()
        vp.continue_drag(10, 10)
        self.assertEqual(vp.state, ViewTransform())

    def test_zoom_direction_and_inverse_pair(self) -> None:
        vp = ViewportController()
        vp.zoom(-120)
        self.assertAlmostEqual(vp.state.scale, 1.1)
        vp.zoom(120)
        self.assertAlmostEqual(vp.state.scale, 1.0)

        for _ in range(5):
            vp.zoom(1)
        for _ in range(5):
            vp.zoom(-1)
        self.assertAlmostEqual(vp.state.scale, 1.0)

    def test_zoom_keeps_pan(self) -> None:
        vp = ViewportController()
        vp.begin_drag(0, 0)
        vp.continue_drag(12, -7)
        vp.end_drag()
        vp.zoom(-1)
        self.assertEqual((vp.state.pan_x, vp.state.pan_y), (12, -7))

    def test_scale_is_clamped(self) -> None:
        vp = ViewportController()
        for _ in range(100):
            vp.zoom(-1)
        self.assertEqual(vp.state.scale, 3.0)
        for _ in range(200):
            vp.zoom(1)
        self.assertEqual(vp.state.scale, 0.2)

    def test_hand_built_config_cannot_escape_hard_limits(self) -> None:
        vp = ViewportController(ViewConfig(min_scale=0.01, max_scale=10.0, zoom_in_factor=0.5))
        for _ in range(100):
            vp.zoom(-1)
        self.assertEqual(vp.state.scale, 3.0)
        self.assertEqual(vp.clamp_scale(0.001), 0.2)

    def test_scale_stays_in_range_under_random_wheel(self) -> None:
        rng = random.Random(7)
        vp = ViewportController()
        for _ in range(2000):
            vp.zoom(rng.choice((-1, 1)) * rng.randint(1, 240))
            self.assertGreaterEqual(vp.state.scale, 0.2)
            self.assertLessEqual(vp.state.scale, 3.0)

    def test_reset(self) -> None:
        vp = ViewportController()
        vp.begin_drag(0, 0)
        vp.continue_drag(30, 30)
        vp.zoom(-1)
        vp.reset()
        self.assertEqual(vp.state, ViewTransform(0.0, 0.0, 1.0))
        self.assertFalse(vp.dragging)


if __name__ == "__main__":
    unittest.main(verbosity=2)
