# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Orbit resolution from partial parameter sets.

An ellipse around a known central body is fixed by two independent
shape parameters. The supplied OrbitSpec is first classified into an
InputPair by priority (first matching rule wins), then the matching
closed form derives the full OrbitState:

    1. rp + ra    h = sqrt(2·mu)·sqrt(rp·ra/(rp+ra)),  e = (ra-rp)/(ra+rp)
    2. rp + ecc   ra = rp·(1+e)/(1-e),                 h = sqrt(rp·mu·(1+e))
    3. rp + vp    h = rp·vp,  e = h²/(rp·mu) - 1,       ra = h²/mu/(1-e)
    4. ra + ecc   rp = ra·(1-e)/(1+e),                 h = sqrt(mu·ra·(1-e))
    5. ra + va    h = ra·va,  e = 1 - ra·va²/mu,        rp = h²/(2·mu - ra·va²)

Any other pair is INCOMPATIBLE; fewer than two fields is INSUFFICIENT.
Ref: Curtis, Orbital Mechanics for Engineering Students, Ch. 2.
"""
import logging
import math
from enum import Enum
from typing import Callable

import numpy as np

from apsis.domain.central_bodies import lookup
from apsis.domain.errors import (
    IncompatibleArguments,
    InsufficientArguments,
    InvalidOrbit,
)
from apsis.domain.orbit_state import OrbitSpec, OrbitState

logger = logging.getLogger(__name__)

# Derived eccentricities closer to zero than this are treated as circular.
_ECC_ZERO_TOL = 1e-12


class InputPair(Enum):
    PERIAPSIS_APOAPSIS = ("rp", "ra")
    PERIAPSIS_ECCENTRICITY = ("rp", "ecc")
    PERIAPSIS_VELOCITY = ("rp", "vp")
    APOAPSIS_ECCENTRICITY = ("ra", "ecc")
    APOAPSIS_VELOCITY = ("ra", "va")
    INCOMPATIBLE = ("incompatible",)
    INSUFFICIENT = ("insufficient",)

    @property
    def fields(self) -> tuple[str, ...]:
        """OrbitSpec fields consumed by this pair (empty for failure cases)."""
        if self in (InputPair.INCOMPATIBLE, InputPair.INSUFFICIENT):
            return ()
        return self.value


# Priority order of the supported closed forms.
_SUPPORTED = (
    InputPair.PERIAPSIS_APOAPSIS,
    InputPair.PERIAPSIS_ECCENTRICITY,
    InputPair.PERIAPSIS_VELOCITY,
    InputPair.APOAPSIS_ECCENTRICITY,
    InputPair.APOAPSIS_VELOCITY,
)


def classify_input(spec: OrbitSpec) -> InputPair:
    """Classify which supported parameter pair a spec carries."""
    present = set(spec.present_fields())
    if len(present) < 2:
        return InputPair.INSUFFICIENT
    for pair in _SUPPORTED:
        if present.issuperset(pair.fields):
            return pair
    return InputPair.INCOMPATIBLE


def _require_positive(name: str, value: float) -> float:
    if not math.isfinite(value) or value <= 0:
        raise InvalidOrbit(f"{name} must be a positive finite number, got {value}")
    return float(value)


def _require_bound_ecc(value: float) -> float:
    if not math.isfinite(value) or not 0.0 <= value < 1.0:
        raise InvalidOrbit(
            f"Only bound elliptical orbits are supported (0 <= ecc < 1), got {value}"
        )
    return float(value)


def _clamp_ecc(ecc: float, context: str) -> float:
    if abs(ecc) < _ECC_ZERO_TOL:
        return 0.0
    if ecc < 0.0:
        raise InvalidOrbit(f"{context} (derived ecc={ecc:.6g})")
    if ecc >= 1.0:
        raise InvalidOrbit(
            f"Speed reaches or exceeds escape speed; orbit is not bound (derived ecc={ecc:.6g})"
        )
    return ecc


def _from_apsides(spec: OrbitSpec, mu: float) -> OrbitState:
    rp = _require_positive("rp", spec.rp)
    ra = _require_positive("ra", spec.ra)
    if ra < rp:
        raise InvalidOrbit(f"Apoapsis {ra} is below periapsis {rp}")
    h = float(np.sqrt(2.0 * mu) * np.sqrt(rp * ra / (rp + ra)))
    ecc = (ra - rp) / (ra + rp)
    return OrbitState(rp=rp, ra=ra, mu=mu, h=h, ecc=ecc)


def _from_periapsis_ecc(spec: OrbitSpec, mu: float) -> OrbitState:
    rp = _require_positive("rp", spec.rp)
    ecc = _require_bound_ecc(spec.ecc)
    ra = rp * (1.0 + ecc) / (1.0 - ecc)
    h = float(np.sqrt(rp * mu * (1.0 + ecc)))
    return OrbitState(rp=rp, ra=ra, mu=mu, h=h, ecc=ecc)


def _from_periapsis_speed(spec: OrbitSpec, mu: float) -> OrbitState:
    rp = _require_positive("rp", spec.rp)
    vp = _require_positive("vp", spec.vp)
    h = rp * vp
    ecc = _clamp_ecc(
        h * h / (rp * mu) - 1.0,
        "Periapsis speed is below circular speed; rp would not be the periapsis",
    )
    # max() absorbs round-off when ecc was clamped to zero
    ra = max(h * h / mu / (1.0 - ecc), rp)
    return OrbitState(rp=rp, ra=ra, mu=mu, h=h, ecc=ecc)


def _from_apoapsis_ecc(spec: OrbitSpec, mu: float) -> OrbitState:
    ra = _require_positive("ra", spec.ra)
    ecc = _require_bound_ecc(spec.ecc)
    rp = ra * (1.0 - ecc) / (1.0 + ecc)
    h = float(np.sqrt(mu * ra * (1.0 - ecc)))
    return OrbitState(rp=rp, ra=ra, mu=mu, h=h, ecc=ecc)


def _from_apoapsis_speed(spec: OrbitSpec, mu: float) -> OrbitState:
    ra = _require_positive("ra", spec.ra)
    va = _require_positive("va", spec.va)
    h = ra * va
    ecc = _clamp_ecc(
        1.0 - ra * va * va / mu,
        "Apoapsis speed is above circular speed; ra would not be the apoapsis",
    )
    rp = min(h * h / (2.0 * mu - ra * va * va), ra)
    return OrbitState(rp=rp, ra=ra, mu=mu, h=h, ecc=ecc)


_SOLVERS: dict[InputPair, Callable[[OrbitSpec, float], OrbitState]] = {
    InputPair.PERIAPSIS_APOAPSIS: _from_apsides,
    InputPair.PERIAPSIS_ECCENTRICITY: _from_periapsis_ecc,
    InputPair.PERIAPSIS_VELOCITY: _from_periapsis_speed,
    InputPair.APOAPSIS_ECCENTRICITY: _from_apoapsis_ecc,
    InputPair.APOAPSIS_VELOCITY: _from_apoapsis_speed,
}


def _checked_pair(spec: OrbitSpec) -> InputPair:
    pair = classify_input(spec)
    if pair is InputPair.INSUFFICIENT:
        raise InsufficientArguments(spec.present_fields())
    if pair is InputPair.INCOMPATIBLE:
        raise IncompatibleArguments(spec.present_fields())
    return pair


def _solve(spec: OrbitSpec, pair: InputPair, mu: float) -> OrbitState:
    ignored = [name for name in spec.present_fields() if name not in pair.fields]
    if ignored:
        logger.debug("Resolving via %s; ignoring %s", pair.name, ", ".join(ignored))
    else:
        logger.debug("Resolving via %s", pair.name)
    return _SOLVERS[pair](spec, mu)


def resolve_with_mu(spec: OrbitSpec, mu: float) -> OrbitState:
    """Resolve a spec against an explicit gravitational parameter.

    spec.spk_id is ignored.

    Args:
        spec: Partial orbit description.
        mu: Gravitational parameter (km³/s²).

    Returns:
        Fully resolved OrbitState.

    Raises:
        InsufficientArguments: Fewer than two shape fields.
        IncompatibleArguments: No supported pair among the fields.
        InvalidOrbit: Values do not describe a bound ellipse.
    """
    pair = _checked_pair(spec)
    if not math.isfinite(mu) or mu <= 0:
        raise InvalidOrbit(f"mu must be a positive finite number, got {mu}")
    return _solve(spec, pair, mu)


def resolve(spec: OrbitSpec) -> OrbitState:
    """Resolve a spec around the central body named by spec.spk_id.

    The input shape is checked before the body, so an empty spec
    reports InsufficientArguments rather than MissingBody.

    Raises:
        InsufficientArguments, IncompatibleArguments, MissingBody,
        UnsupportedBody, InvalidOrbit.
    """
    pair = _checked_pair(spec)
    return _solve(spec, pair, lookup(spec.spk_id))


def orbit_from_apsides(rp: float, ra: float, mu: float) -> OrbitState:
    """Shorthand for resolving rule 1 (periapsis + apoapsis)."""
    return resolve_with_mu(OrbitSpec(rp=rp, ra=ra), mu)
