# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Coplanar Hohmann transfer between two resolved orbits.

The transfer ellipse is tangent to the origin at one apsis and to the
destination at the opposite apsis: its periapsis is the lower of the
two periapsides and its apoapsis the higher of the two apoapsides.
Apsides of both orbits are assumed co-aligned.

Burns are signed: positive is prograde, negative retrograde.
"""
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from apsis.domain.errors import AmbiguousDirection, MismatchedBodies
from apsis.domain.orbit_resolver import orbit_from_apsides
from apsis.domain.orbit_state import OrbitState

logger = logging.getLogger(__name__)

_MU_REL_TOL = 1e-12


class TransferDirection(Enum):
    OUTWARD = "outward"
    INWARD = "inward"


@dataclass(frozen=True)
class DeltaVResult:
    """Two-burn velocity budget (km/s)."""
    burn1: float  # injection into the transfer ellipse
    burn2: float  # insertion into the destination orbit
    total: float  # |burn1| + |burn2|


class TransferSolution(NamedTuple):
    transfer: OrbitState
    delta_v: DeltaVResult
    transfer_time_s: float


def transfer_direction(origin: OrbitState, destination: OrbitState) -> TransferDirection:
    """Classify the transfer as outward or inward.

    Disjoint or touching ranges: the lower orbit is inner.
    Nested ranges: the contained orbit is inner.
    Identical orbits are OUTWARD.

    Raises:
        AmbiguousDirection: If the radius ranges interleave
            (o.rp < d.rp < o.ra < d.ra or its mirror).
    """
    if origin.ra <= destination.rp:
        return TransferDirection.OUTWARD
    if destination.ra <= origin.rp:
        return TransferDirection.INWARD
    if destination.rp <= origin.rp and origin.ra <= destination.ra:
        return TransferDirection.OUTWARD
    if origin.rp <= destination.rp and destination.ra <= origin.ra:
        return TransferDirection.INWARD
    raise AmbiguousDirection(
        f"Cannot classify inner/outer orbit: origin spans [{origin.rp}, {origin.ra}] km, "
        f"destination spans [{destination.rp}, {destination.ra}] km and the ranges overlap"
    )


def plan_transfer(origin: OrbitState, destination: OrbitState) -> TransferSolution:
    """Hohmann transfer from origin to destination.

    Outward: burn 1 at origin periapsis, burn 2 at destination apoapsis.
    Inward: burn 1 at origin apoapsis, burn 2 at destination periapsis.
    Nested orbits use the same apsis-speed differences.
    Transfer time is half the transfer ellipse period.

    Args:
        origin: Starting orbit.
        destination: Target orbit around the same central body.

    Returns:
        TransferSolution(transfer, delta_v, transfer_time_s).

    Raises:
        MismatchedBodies: If the orbits have different mu.
        AmbiguousDirection: If neither orbit is clearly inner.
    """
    if not math.isclose(origin.mu, destination.mu, rel_tol=_MU_REL_TOL):
        raise MismatchedBodies(
            f"Orbits must share a central body (mu {origin.mu} != {destination.mu})"
        )

    direction = transfer_direction(origin, destination)
    transfer = orbit_from_apsides(
        min(origin.rp, destination.rp),
        max(origin.ra, destination.ra),
        origin.mu,
    )

    va_t, vp_t = transfer.apsis_velocities()
    va_o, vp_o = origin.apsis_velocities()
    va_d, vp_d = destination.apsis_velocities()

    if direction is TransferDirection.OUTWARD:
        burn1 = vp_t - vp_o
        burn2 = va_d - va_t
    else:
        burn1 = va_t - va_o
        burn2 = vp_d - vp_t

    delta_v = DeltaVResult(
        burn1=burn1,
        burn2=burn2,
        total=abs(burn1) + abs(burn2),
    )
    transfer_time = transfer.period() / 2.0

    logger.debug(
        "%s transfer rp=%.3f ra=%.3f dv=%.6f km/s t=%.1f s",
        direction.value, transfer.rp, transfer.ra, delta_v.total, transfer_time,
    )
    return TransferSolution(transfer=transfer, delta_v=delta_v, transfer_time_s=transfer_time)
