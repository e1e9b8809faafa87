"""Tests for command line handling and the pygame host."""

import tempfile
import unittest
from pathlib import Path

import support  # noqa: F401

import pygame

from main import build_config, parse_args
from phat_parrot.game import TICK_EVENT, ParrotGame


class TestCommandLine(unittest.TestCase):

    def test_defaults_leave_config_untouched(self):
        config = build_config(parse_args([]))
        self.assertEqual(config.loop.initial_interval_ms, 80)
        self.assertIsNone(config.asset_dir)
        self.assertEqual(config.socket_input.port, 4790)

    def test_speed_override(self):
        config = build_config(parse_args(["--speed", "40"]))
        self.assertEqual(config.loop.initial_interval_ms, 40)

    def test_socket_overrides(self):
        config = build_config(parse_args(["--socket-host", "0.0.0.0", "--socket-port", "5000"]))
        self.assertEqual(config.socket_input.host, "0.0.0.0")
        self.assertEqual(config.socket_input.port, 5000)

    def test_asset_directory(self):
        with tempfile.TemporaryDirectory() as tmp:
            config = build_config(parse_args(["--assets", tmp]))
        self.assertEqual(config.asset_dir, Path(tmp))

    def test_missing_asset_directory_is_an_error(self):
        with self.assertRaises(SystemExit):
            parse_args(["--assets", "/definitely/not/here"])

    def test_log_level_choices(self):
        self.assertEqual(parse_args(["--log-level", "DEBUG"]).log_level, "DEBUG")
        with self.assertRaises(SystemExit):
            parse_args(["--log-level", "LOUD"])


class TestParrotGame(unittest.TestCase):

    def test_headless_run_ticks_and_quits(self):
        with tempfile.TemporaryDirectory() as tmp:
            config = build_config(parse_args(["--assets", tmp]))
            game = ParrotGame(config=config)
        world = game.loop.world
        self.assertTrue(world.flyer.ready)

        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_f))
        pygame.event.post(pygame.event.Event(TICK_EVENT))
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        game.run()

        self.assertTrue(world.gates.started)
        self.assertEqual(world.flyer.vy, -9)
        self.assertFalse(game.loop.running)


if __name__ == "__main__":
    unittest.main()
