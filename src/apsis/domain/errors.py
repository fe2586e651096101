# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Error taxonomy for orbit resolution and transfer planning.

Every error derives from ValueError so callers that already guard
numeric input with ``except ValueError`` keep working.
"""


class ApsisError(ValueError):
    """Base class for all apsis errors."""


class MissingBody(ApsisError):
    """No central-body code was supplied."""

    def __init__(self) -> None:
        super().__init__("No central body given (spk_id is required)")


class UnsupportedBody(ApsisError):
    """Central-body code is outside the gravitational parameter table."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"Unsupported central body code: {code}")


class InsufficientArguments(ApsisError):
    """Fewer than two shape-determining fields were supplied."""

    def __init__(self, present: tuple[str, ...] = ()) -> None:
        self.present = present
        given = ", ".join(present) if present else "none"
        super().__init__(
            f"Not enough arguments: need at least 2 of rp, ra, ecc, vp, va (got {given})"
        )


class IncompatibleArguments(ApsisError):
    """Two fields were supplied but no closed form combines them."""

    def __init__(self, present: tuple[str, ...]) -> None:
        self.present = present
        super().__init__(
            f"Incompatible arguments: cannot resolve an orbit from {', '.join(present)}"
        )


class InvalidOrbit(ApsisError):
    """Input describes something other than a bound elliptical orbit."""


class AmbiguousDirection(ApsisError):
    """Transfer planner cannot classify one orbit as inner and one as outer."""


class MismatchedBodies(ApsisError):
    """Two orbits passed to the planner do not share a gravitational parameter."""


class ConfigError(ApsisError):
    """Configuration record is malformed."""
