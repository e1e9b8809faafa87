"""Tests for keyboard and socket input providers."""

import unittest

import support  # noqa: F401

import pygame

from phat_parrot.config import SocketInputConfig
from phat_parrot.input import KeyboardInput, SocketInput


def key_event(event_type, key):
    return pygame.event.Event(event_type, key=key)


class TestKeyboardInput(unittest.TestCase):

    def test_keeps_keydown_in_order(self):
        provider = KeyboardInput()
        events = [
            key_event(pygame.KEYDOWN, pygame.K_f),
            key_event(pygame.KEYUP, pygame.K_f),
            key_event(pygame.KEYDOWN, pygame.K_p),
        ]
        self.assertEqual(provider.poll(events), [pygame.K_f, pygame.K_p])

    def test_quit_key_is_left_to_the_host(self):
        provider = KeyboardInput()
        events = [key_event(pygame.KEYDOWN, pygame.K_ESCAPE)]
        self.assertEqual(provider.poll(events), [])

    def test_ignores_non_key_events(self):
        provider = KeyboardInput()
        self.assertEqual(provider.poll([pygame.event.Event(pygame.QUIT)]), [])


class TestSocketInput(unittest.TestCase):

    def setUp(self):
        self.provider = SocketInput(config=SocketInputConfig(port=0))

    def tearDown(self):
        self.provider.shutdown()

    def test_command_maps_to_bound_key(self):
        self.provider._process_line(b'{"command": "flap"}')
        self.provider._process_line(b'{"command": "SPEED_UP"}')
        self.assertEqual(self.provider.poll([]), [pygame.K_f, pygame.K_EQUALS])

    def test_single_character_key(self):
        self.provider._process_line(b'{"key": "P"}')
        self.assertEqual(self.provider.poll([]), [pygame.K_p])

    def test_remote_keys_follow_local_keys(self):
        self.provider._process_line(b'{"command": "reset"}')
        events = [key_event(pygame.KEYDOWN, pygame.K_f)]
        self.assertEqual(self.provider.poll(events), [pygame.K_f, pygame.K_r])
        self.assertEqual(self.provider.poll([]), [])

    def test_bad_input_is_ignored(self):
        for line in (b"", b"not json", b"[1, 2]", b'{"command": "fly"}', b'{"key": "ab"}', b"\xff\xfe"):
            self.provider._process_line(line)
        self.assertEqual(self.provider.poll([]), [])


if __name__ == "__main__":
    unittest.main()
