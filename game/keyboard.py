"""Held-key bookkeeping shared between the event pump and the frame driver."""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping


class InputState:
    """Tracks which keys are held, keyed by lower-cased key name.

    Events are only applied while attached; detaching drops every held key
    so a stopped simulation never sees stale input.
    """

    def __init__(self) -> None:
        self._held: Dict[str, bool] = {}
        self.attached = False

    def attach(self) -> None:
        self.attached = True

    def detach(self) -> None:
        self.attached = False
        self._held.clear()

    def key_down(self, key: str) -> None:
        self.set_key(key, True)

    def key_up(self, key: str) -> None:
        self.set_key(key, False)

    def set_key(self, key: str, held: bool) -> None:
        if not self.attached or not key:
            return
        self._held[key.lower()] = held

    def snapshot(self) -> Mapping[str, bool]:
        """Return a read-only copy of the current key state."""

        return MappingProxyType(dict(self._held))
