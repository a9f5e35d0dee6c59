"""Numeric comparison under an optional absolute tolerance.

Numbers are ``Decimal`` throughout, so equality is mathematical rather than
textual: ``Decimal("1.0") == Decimal("1")``.
"""

from __future__ import annotations

from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_DOWN,
    Decimal,
    Inexact,
    InvalidOperation,
    localcontext,
)

from json_unit.errors import ConfigurationError

__all__ = ["coerce_tolerance", "numbers_equal"]

_MIN_PREC = 28


def coerce_tolerance(value: Decimal | float | int | str | None) -> Decimal | None:
    """Convert a user-supplied tolerance into ``Decimal | None``.

    Floats are converted through ``repr`` so ``0.01`` becomes exactly
    ``Decimal("0.01")``.

    Raises:
        ConfigurationError: If the value is negative, non-finite or not a
            number at all.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ConfigurationError(f"tolerance must be a number, got {value!r}")
    try:
        tolerance = Decimal(repr(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise ConfigurationError(f"tolerance must be a number, got {value!r}") from exc
    if not tolerance.is_finite():
        raise ConfigurationError(f"tolerance must be finite, got {value!r}")
    if tolerance < 0:
        raise ConfigurationError(f"tolerance must be >= 0, got {value!r}")
    return tolerance


def numbers_equal(
    expected: Decimal,
    actual: Decimal,
    tolerance: Decimal | None = None,
) -> bool:
    """Return True if two numbers are equal within ``tolerance``.

    The distance is computed in a context wide enough for any finite JSON
    exponent, with just enough digits that ``tolerance`` sits on the
    rounding grid of the result.  Rounding toward zero then decides the
    comparison exactly, however far apart the operand exponents are.

    Args:
        expected:  Number from the expected tree.
        actual:    Number from the actual tree.
        tolerance: Maximum allowed absolute difference (inclusive).  None
                   requires exact equality.

    Raises:
        ConfigurationError: If ``tolerance`` is negative.
    """
    if tolerance is None:
        return expected == actual
    if tolerance < 0:
        raise ConfigurationError(f"tolerance must be >= 0, got {tolerance}")
    if expected == actual:
        return True
    with localcontext() as ctx:
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        ctx.rounding = ROUND_DOWN
        ctx.prec = _distance_precision(expected, actual, tolerance)
        ctx.clear_flags()
        distance = abs(expected - actual)
        if distance < tolerance:
            return True
        # A truncated distance equal to the tolerance means the true one is larger.
        return distance == tolerance and not ctx.flags[Inexact]


def _distance_precision(a: Decimal, b: Decimal, tolerance: Decimal) -> int:
    top = max(a.adjusted(), b.adjusted())
    grid = int(tolerance.as_tuple().exponent)
    return min(MAX_PREC, max(_MIN_PREC, top - grid + 3))
