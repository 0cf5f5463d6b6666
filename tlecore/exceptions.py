"""Errors raised while propagating satellite orbits."""

from __future__ import annotations

from typing import Any


class PropagationError(Exception):
    """Raised when an orbit cannot be propagated."""

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""


class DecayError(PropagationError):
    """Raised when a satellite's orbit has decayed."""

    def __init__(self, decay_time: Any, satellite_name: str) -> None:
        super().__init__(f"orbit of {satellite_name!r} decayed")
        self.decay_time = decay_time
        self.satellite_name = satellite_name