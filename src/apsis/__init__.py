"""
Apsis

Resolve two-body orbits from partial parameter sets (any supported pair
of periapsis, apoapsis, eccentricity and apsis speeds around a named
central body) and plan coplanar Hohmann transfers between them, with
signed two-burn delta-V and transfer time.
"""

from apsis.domain.errors import (
    ApsisError,
    MissingBody,
    UnsupportedBody,
    InsufficientArguments,
    IncompatibleArguments,
    InvalidOrbit,
    AmbiguousDirection,
    MismatchedBodies,
    ConfigError,
)
from apsis.domain.central_bodies import (
    CentralBody,
    CENTRAL_BODIES,
    central_body,
    lookup,
)
from apsis.domain.orbit_state import (
    OrbitSpec,
    OrbitState,
)
from apsis.domain.orbit_resolver import (
    InputPair,
    classify_input,
    resolve,
    resolve_with_mu,
    orbit_from_apsides,
)
from apsis.domain.transfer import (
    DeltaVResult,
    TransferDirection,
    TransferSolution,
    plan_transfer,
    transfer_direction,
)
from apsis.domain.mission import (
    TransferRequest,
    TransferReport,
    plan_mission,
)

__version__ = "0.1.0"

__all__ = [
    "ApsisError",
    "MissingBody",
    "UnsupportedBody",
    "InsufficientArguments",
    "IncompatibleArguments",
    "InvalidOrbit",
    "AmbiguousDirection",
    "MismatchedBodies",
    "ConfigError",
    "CentralBody",
    "CENTRAL_BODIES",
    "central_body",
    "lookup",
    "OrbitSpec",
    "OrbitState",
    "InputPair",
    "classify_input",
    "resolve",
    "resolve_with_mu",
    "orbit_from_apsides",
    "DeltaVResult",
    "TransferDirection",
    "TransferSolution",
    "plan_transfer",
    "transfer_direction",
    "TransferRequest",
    "TransferReport",
    "plan_mission",
]
