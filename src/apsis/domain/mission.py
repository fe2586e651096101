# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
End-to-end transfer pipeline.

Two partial orbit specs in, resolved orbits plus the Hohmann transfer
out. This is the record a config reader produces and a report
writer consumes.
"""
from dataclasses import dataclass

from apsis.domain.central_bodies import central_body
from apsis.domain.errors import MismatchedBodies
from apsis.domain.orbit_resolver import resolve
from apsis.domain.orbit_state import OrbitSpec, OrbitState
from apsis.domain.transfer import (
    DeltaVResult,
    TransferDirection,
    plan_transfer,
    transfer_direction,
)


@dataclass(frozen=True)
class TransferRequest:
    """Origin and destination orbit specs."""
    orbit1: OrbitSpec
    orbit2: OrbitSpec


@dataclass(frozen=True)
class TransferReport:
    """Everything computed for a transfer request."""
    body_name: str
    origin: OrbitState
    destination: OrbitState
    transfer: OrbitState
    delta_v: DeltaVResult
    transfer_time_s: float
    direction: TransferDirection


def plan_mission(request: TransferRequest) -> TransferReport:
    """Resolve both orbits of a request and plan the transfer between them.

    Raises:
        MismatchedBodies: If the two specs name different central bodies.
        ApsisError: Any resolver or planner failure, unchanged.
    """
    origin = resolve(request.orbit1)
    destination = resolve(request.orbit2)
    if request.orbit1.spk_id != request.orbit2.spk_id:
        raise MismatchedBodies(
            f"orbit1 is around body {request.orbit1.spk_id}, "
            f"orbit2 around body {request.orbit2.spk_id}"
        )

    transfer, delta_v, transfer_time = plan_transfer(origin, destination)
    return TransferReport(
        body_name=central_body(request.orbit1.spk_id).name,
        origin=origin,
        destination=destination,
        transfer=transfer,
        delta_v=delta_v,
        transfer_time_s=transfer_time,
        direction=transfer_direction(origin, destination),
    )
