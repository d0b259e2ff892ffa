"""Solver configuration for XIRR computations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from mwrlib.conventions.daycount import is_known_day_count


@dataclass(frozen=True)
class SolverConfig:
    """Configuration knobs for the secant/Brent XIRR solver."""

    # Convergence precision on the discount factor, shared by both phases.
    precision: float = 1e-6
    max_iterations: int = 100
    # Probes spent looking for a positive and a negative witness.
    max_bracket_points: int = 1000
    # Absolute residual accepted by the root sanity check. Far looser than
    # ``precision``; it only rejects convergence towards a non-root.
    root_tolerance: float = 1.0
    secant_start: Tuple[float, float] = (0.5, 1.0)
    # When True, Brent refuses endpoints that do not straddle zero instead
    # of recording a diagnostic and carrying on.
    strict_bracket: bool = False
    day_count: str = "ACT/365F"

    def __post_init__(self) -> None:
        if not self.precision > 0.0:
            raise ValueError(f"precision must be positive, got {self.precision}")
        if self.max_iterations <= 0:
            raise ValueError(f"max_iterations must be positive, got {self.max_iterations}")
        if self.max_bracket_points <= 0:
            raise ValueError(
                f"max_bracket_points must be positive, got {self.max_bracket_points}"
            )
        if not self.root_tolerance > 0.0:
            raise ValueError(f"root_tolerance must be positive, got {self.root_tolerance}")
        if len(self.secant_start) != 2:
            raise ValueError("secant_start must hold exactly two points")
        if self.secant_start[0] == self.secant_start[1]:
            raise ValueError(f"secant_start points must differ, got {self.secant_start}")
        if not is_known_day_count(self.day_count):
            raise ValueError(f"Unsupported day count convention: {self.day_count}")


DEFAULT_CONFIG = SolverConfig()
