"""Tests for the parrot's flight physics and life cycle."""

import unittest

from support import FLYER_SIZE, make_frames

import pygame

from phat_parrot.config import FlyerConfig, KeyBindings
from phat_parrot.flyer import DEAD, WING_DOWN, WING_UP, Flyer

SCREEN = (600, 480)


def ready_flyer():
    flyer = Flyer(FlyerConfig(), KeyBindings(), SCREEN)
    flyer.load_frames(make_frames())
    return flyer


class TestAwaitingDimensions(unittest.TestCase):
    """Before frames arrive the parrot is inert."""

    def test_not_ready_until_frames_loaded(self):
        flyer = Flyer(FlyerConfig(), KeyBindings(), SCREEN)
        self.assertFalse(flyer.ready)
        self.assertEqual((flyer.w, flyer.h), (0, 0))

    def test_update_is_noop_before_ready(self):
        flyer = Flyer(FlyerConfig(), KeyBindings(), SCREEN)
        flyer.update()
        self.assertEqual(flyer.frame, WING_DOWN)
        self.assertEqual(flyer.y, 0)

    def test_draw_is_noop_before_ready(self):
        flyer = Flyer(FlyerConfig(), KeyBindings(), SCREEN)
        surface = pygame.Surface(SCREEN)
        flyer.draw(surface)

    def test_load_frames_sizes_and_centres(self):
        flyer = ready_flyer()
        self.assertTrue(flyer.ready)
        self.assertEqual((flyer.w, flyer.h), FLYER_SIZE)
        self.assertEqual(flyer.x, 280)
        self.assertEqual(flyer.y, 225)

    def test_empty_frame_list_keeps_waiting(self):
        flyer = Flyer(FlyerConfig(), KeyBindings(), SCREEN)
        flyer.load_frames([])
        self.assertFalse(flyer.ready)


class TestFlight(unittest.TestCase):

    def test_resting_parrot_ignores_gravity(self):
        flyer = ready_flyer()
        for _ in range(20):
            flyer.update()
        self.assertEqual(flyer.y, 225)
        self.assertFalse(flyer.launched)

    def test_flap_launches_upward(self):
        flyer = ready_flyer()
        flyer.receive_key(pygame.K_f)
        self.assertTrue(flyer.launched)
        self.assertEqual(flyer.vy, -10)

        flyer.update()
        self.assertEqual(flyer.y, 215)
        self.assertEqual(flyer.vy, -9)

    def test_velocity_grows_past_zero(self):
        flyer = ready_flyer()
        flyer.receive_key(pygame.K_f)
        for _ in range(12):
            flyer.update()
        self.assertEqual(flyer.vy, 2)

    def test_wings_alternate_every_tick(self):
        flyer = ready_flyer()
        frames = []
        for _ in range(4):
            flyer.update()
            frames.append(flyer.frame)
        self.assertEqual(frames, [WING_UP, WING_DOWN, WING_UP, WING_DOWN])

    def test_floor_clamp(self):
        flyer = ready_flyer()
        flyer.receive_key(pygame.K_f)
        for _ in range(200):
            flyer.update()
            self.assertLessEqual(flyer.y, 450)
        self.assertEqual(flyer.y, 450)
        self.assertEqual(flyer.vy, 0)

    def test_ceiling_clamp_under_constant_flapping(self):
        flyer = ready_flyer()
        for _ in range(200):
            flyer.receive_key(pygame.K_f)
            flyer.update()
            self.assertGreaterEqual(flyer.y, 0)
            self.assertLessEqual(flyer.y, 450)

    def test_cannot_flap_at_top_edge(self):
        flyer = ready_flyer()
        flyer.y = 0
        flyer.receive_key(pygame.K_f)
        self.assertFalse(flyer.launched)
        self.assertEqual(flyer.vy, 0)


class TestDeathAndReset(unittest.TestCase):

    def test_hit_kills_parrot(self):
        flyer = ready_flyer()
        flyer.receive_key(pygame.K_f)
        flyer.hit()
        self.assertFalse(flyer.alive)
        self.assertEqual(flyer.frame, DEAD)
        self.assertEqual(flyer.vy, 0)

    def test_dead_parrot_stops_flapping_and_cannot_fly(self):
        flyer = ready_flyer()
        flyer.hit()
        flyer.update()
        self.assertEqual(flyer.frame, DEAD)
        flyer.receive_key(pygame.K_f)
        self.assertEqual(flyer.vy, 0)

    def test_dead_parrot_falls_to_floor_and_stays(self):
        flyer = ready_flyer()
        flyer.receive_key(pygame.K_f)
        flyer.update()
        flyer.hit()
        for _ in range(100):
            flyer.update()
        self.assertEqual(flyer.y, 450)

    def test_reset_restores_resting_state(self):
        flyer = ready_flyer()
        flyer.receive_key(pygame.K_f)
        for _ in range(5):
            flyer.update()
        flyer.hit()
        flyer.receive_key(pygame.K_r)
        self.assertTrue(flyer.alive)
        self.assertFalse(flyer.launched)
        self.assertEqual(flyer.frame, WING_DOWN)
        self.assertEqual((flyer.x, flyer.y), (280, 225))
        self.assertEqual(flyer.vy, 0)


class TestImmunity(unittest.TestCase):

    def test_toggle(self):
        flyer = ready_flyer()
        flyer.receive_key(pygame.K_i)
        self.assertTrue(flyer.immune)
        flyer.receive_key(pygame.K_i)
        self.assertFalse(flyer.immune)

    def test_immunity_does_not_change_physics(self):
        normal = ready_flyer()
        ghost = ready_flyer()
        ghost.receive_key(pygame.K_i)
        for flyer in (normal, ghost):
            flyer.receive_key(pygame.K_f)
            for _ in range(7):
                flyer.update()
        self.assertEqual(normal.y, ghost.y)
        self.assertEqual(normal.vy, ghost.vy)


if __name__ == "__main__":
    unittest.main()
