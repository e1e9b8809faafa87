"""Input abstractions: sources of discrete key codes for the game loop."""

from __future__ import annotations

import json
import logging
import socket
import threading
from collections import deque
from typing import Deque, Optional, Protocol, Sequence

import pygame

from .config import KeyBindings, SocketInputConfig

logger = logging.getLogger(__name__)


class InputProvider(Protocol):
    """Interface for supplying key codes to the game loop."""

    def poll(self, events: Sequence[pygame.event.Event]) -> list[int]:
        """Return the key codes pressed since the last poll, oldest first."""


class KeyboardInput(InputProvider):
    """Default keyboard controller: every KEYDOWN becomes a key code."""

    def __init__(self, keys: Optional[KeyBindings] = None) -> None:
        self.keys = keys or KeyBindings()

    def poll(self, events: Sequence[pygame.event.Event]) -> list[int]:
        return [
            event.key
            for event in events
            if event.type == pygame.KEYDOWN and event.key not in self.keys.quit
        ]


class SocketInput(InputProvider):
    """Listens for JSON command lines over TCP and queues them as key codes.

    Each line is an object such as ``{"command": "flap"}`` or ``{"key": "f"}``.
    Commands are translated through the key bindings so remote input takes
    exactly the same path as a keypress.
    """

    def __init__(
        self,
        base: Optional[InputProvider] = None,
        config: Optional[SocketInputConfig] = None,
        keys: Optional[KeyBindings] = None,
    ) -> None:
        self.keys = keys or KeyBindings()
        self.base = base or KeyboardInput(self.keys)
        self.cfg = config or SocketInputConfig()
        self._lock = threading.Lock()
        self._pending: Deque[int] = deque()
        self._running = threading.Event()
        self._running.set()
        self._thread = threading.Thread(target=self._run_server, name="SocketInput", daemon=True)
        self._thread.start()

    def poll(self, events: Sequence[pygame.event.Event]) -> list[int]:
        pressed = self.base.poll(events)
        with self._lock:
            while self._pending:
                pressed.append(self._pending.popleft())
        return pressed

    def shutdown(self) -> None:
        self._running.clear()
        if self._thread.is_alive():
            self._thread.join(timeout=1.5)
        if hasattr(self.base, "shutdown"):
            self.base.shutdown()  # type: ignore[attr-defined]

    def _run_server(self) -> None:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
            server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            try:
                server.bind((self.cfg.host, self.cfg.port))
                server.listen(self.cfg.backlog)
                server.settimeout(1.0)
            except OSError as exc:
                logger.warning("Socket input disabled, cannot listen on %s:%d: %s",
                               self.cfg.host, self.cfg.port, exc)
                return
            logger.info("Socket input listening on %s:%d", self.cfg.host, self.cfg.port)

            while self._running.is_set():
                try:
                    client, address = server.accept()
                    client.settimeout(self.cfg.read_timeout)
                except socket.timeout:
                    continue
                except OSError:
                    break
                logger.debug("Socket input client connected from %s", address)
                threading.Thread(
                    target=self._handle_client,
                    args=(client,),
                    daemon=True,
                ).start()

    def _handle_client(self, client: socket.socket) -> None:
        with client:
            buffer = bytearray()
            while self._running.is_set():
                try:
                    data = client.recv(4096)
                except socket.timeout:
                    continue
                except OSError:
                    break
                if not data:
                    break
                buffer.extend(data)
                while b"\n" in buffer:
                    line, _, remainder = buffer.partition(b"\n")
                    buffer = bytearray(remainder)
                    self._process_line(line.strip())

    def _process_line(self, raw: bytes) -> None:
        if not raw:
            return
        try:
            payload = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError):
            logger.debug("Ignoring malformed socket input %r", raw)
            return
        if not isinstance(payload, dict):
            return

        key = self._translate(payload)
        if key is None:
            return
        with self._lock:
            self._pending.append(key)

    def _translate(self, payload: dict) -> Optional[int]:
        command = payload.get("command")
        if isinstance(command, str):
            codes = self.keys.commands().get(command.lower())
            return codes[0] if codes else None

        # pygame key codes for printable keys are their lowercase code points.
        name = payload.get("key")
        if isinstance(name, str) and len(name) == 1:
            key = ord(name.lower())
            return None if key in self.keys.quit else key
        return None
