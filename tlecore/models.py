"""Simple orbital motion models stepped through time."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, ClassVar, Sequence

_Term = Callable[[float, Sequence[float], Sequence[float]], float]


@dataclass
class GravityModel:
    """Two-body point-mass gravity, advanced by explicit Euler steps."""

    mu: float

    def next_state(self, state: Sequence[float], t: float, dt: float) -> list[float]:
        """Advance ``[rx, ry, rz, vx, vy, vz]`` by ``dt``.

        ``t`` is accepted for the ODE interface; the force does not depend on it.
        """
        if len(state) != 6:
            raise ValueError(f"state must have 6 components, got {len(state)}")
        r = state[:3]
        v = state[3:]
        r_mag = math.sqrt(sum(c * c for c in r))
        accel = -self.mu / (r_mag * r_mag * r_mag)
        position = [ri + vi * dt for ri, vi in zip(r, v)]
        velocity = [vi + accel * ri * dt for ri, vi in zip(r, v)]
        return position + velocity


@dataclass
class ReactionModel:
    """Parametrised ODE model selected by ``model_type``."""

    # Right-hand-side terms for each known model type (1: own model, 2: SGP).
    # Neither model defines any terms yet, so both yield an empty derivative.
    _TERMS: ClassVar[dict[int, tuple[_Term, ...]]] = {1: (), 2: ()}

    params: list[float] = field(default_factory=lambda: [1.0, 2.5])
    model_type: int = 0

    def right_part(self, t: float, x: Sequence[float]) -> list[float]:
        """Evaluate the right-hand side of the ODE for the selected model type."""
        terms = self._TERMS.get(self.model_type, ())
        return [term(t, x, self.params) for term in terms]