"""Money-weighted return (XIRR) of an account schedule."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Tuple, Union

import logging

from mwrlib.config import DEFAULT_CONFIG, SolverConfig
from mwrlib.schedule import Schedule

from .errors import (
    DegenerateSecantError,
    Diagnostic,
    InfiniteIRRError,
    NotARealNumberError,
    XIRRError,
)
from .polynomial import build_polynomial
from .rootfinding import RootResult, brent, find_bracket, secant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class XIRRResult:
    """Annualized money-weighted return of one account.

    Attributes:
        account: Account name
        rate: Annual rate as a fraction (0.10 for 10%)
        root: Discount-factor root behind ``rate``; None when the cashflow
            has fewer than two distinct dates and the rate defaults to 0
    """

    account: str
    rate: float
    root: RootResult | None = None

    @property
    def method(self) -> str | None:
        return self.root.method if self.root is not None else None

    @property
    def diagnostics(self) -> Tuple[Diagnostic, ...]:
        return self.root.diagnostics if self.root is not None else ()

    @property
    def verified(self) -> bool:
        return self.root is None or self.root.verified


def rate_from_root(root: float) -> float:
    """Convert a discount factor x = 1 / (1 + rate) into the rate."""
    if root == 0:
        raise InfiniteIRRError("Got root of 0, meaning infinite IRR", root=root)
    return -1.0 + 1.0 / root


def compute_xirr(schedule: Schedule, config: SolverConfig | None = None) -> XIRRResult:
    """Compute the XIRR of ``schedule``.

    The secant method is tried first. If it fails on a degenerate step or a
    non-real value, or does not converge, the polynomial is probed for a
    sign change and Brent's method is run on that bracket.

    Raises
    ------
    ValueError
        If the schedule has no closing entry.
    XIRRError
        If neither phase yields a root, or the root is 0 (infinite rate).
    """
    config = config or DEFAULT_CONFIG

    entries = schedule.entries()
    poly = build_polynomial(
        entries,
        schedule.reference_start(),
        day_count=config.day_count,
        root_tolerance=config.root_tolerance,
    )
    if len(poly) < 2:
        logger.debug(
            "%s: %d non-zero cashflow dates, reporting a rate of 0", schedule.account, len(poly)
        )
        return XIRRResult(schedule.account, 0.0)

    p0, p1 = config.secant_start
    try:
        result = secant(
            poly,
            p0,
            p1,
            precision=config.precision,
            max_iterations=config.max_iterations,
            root_tolerance=config.root_tolerance,
        )
    except (DegenerateSecantError, NotARealNumberError) as exc:
        logger.info("%s: secant failed (%s), falling back to brent", schedule.account, exc)
        result = None
    else:
        if result is None:
            logger.info("%s: secant did not converge, falling back to brent", schedule.account)

    if result is None:
        try:
            a, b = find_bracket(poly, config.max_bracket_points)
            result = brent(
                poly,
                a,
                b,
                precision=config.precision,
                max_iterations=config.max_iterations,
                root_tolerance=config.root_tolerance,
                strict_bracket=config.strict_bracket,
            )
        except XIRRError as exc:
            logger.error("%s: root finding failed: %s", schedule.account, exc)
            raise

    logger.debug(
        "%s: root %s after %s iterations via %s",
        schedule.account, result.root, result.iterations, result.method,
    )
    try:
        rate = rate_from_root(result.root)
    except InfiniteIRRError as exc:
        logger.error("%s: %s", schedule.account, exc)
        raise
    return XIRRResult(schedule.account, rate, result)


def xirr_by_account(
    schedules: Mapping[str, Schedule] | Iterable[Schedule],
    config: SolverConfig | None = None,
) -> Dict[str, Union[XIRRResult, XIRRError]]:
    """Compute the XIRR of every schedule independently.

    A failing account does not stop the batch: its error is logged and
    stored in place of a result. The mapping is ordered by account name.
    """
    items = schedules.values() if isinstance(schedules, Mapping) else schedules
    outcomes: Dict[str, Union[XIRRResult, XIRRError]] = {}
    for schedule in sorted(items, key=lambda s: s.account):
        try:
            outcomes[schedule.account] = compute_xirr(schedule, config)
        except XIRRError as exc:
            logger.warning("%s: %s", schedule.account, exc)
            outcomes[schedule.account] = exc

    failed = sum(isinstance(v, XIRRError) for v in outcomes.values())
    logger.info("Computed XIRR for %d accounts (%d failed)", len(outcomes), failed)
    return outcomes
