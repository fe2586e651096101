# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Orbit records.

OrbitSpec is the partial, unvalidated parameter set a caller supplies.
OrbitState is the fully resolved bound ellipse derived from it.

Units throughout: km, km/s, km³/s², km²/s, s.
"""
import math
from dataclasses import dataclass
from typing import Any, Mapping

import numpy as np

from apsis.domain.errors import ConfigError, InvalidOrbit

# Shape-determining fields in resolver priority order.
SHAPE_FIELDS = ("rp", "ra", "ecc", "vp", "va")

# Config-file key -> OrbitSpec field
_CONFIG_KEYS = {
    "peri": "rp",
    "apo": "ra",
    "ecc": "ecc",
    "vel_p": "vp",
    "vel_a": "va",
}


@dataclass(frozen=True)
class OrbitSpec:
    """Partial orbit description. Any field may be None."""
    rp: float | None = None    # periapsis radius (km)
    ra: float | None = None    # apoapsis radius (km)
    ecc: float | None = None   # eccentricity
    vp: float | None = None    # speed at periapsis (km/s)
    va: float | None = None    # speed at apoapsis (km/s)
    spk_id: int | None = None  # central body code

    def present_fields(self) -> tuple[str, ...]:
        """Names of the shape-determining fields that are set."""
        return tuple(name for name in SHAPE_FIELDS if getattr(self, name) is not None)

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        default_spk_id: int | None = None,
    ) -> "OrbitSpec":
        """Build a spec from a config table.

        Accepts the keys peri, apo, ecc, vel_p, vel_a and spk_id.
        A non-null spk_id in the table overrides default_spk_id.

        Raises:
            ConfigError: On unknown keys or non-numeric values.
        """
        if not isinstance(data, Mapping):
            raise ConfigError(f"Orbit table must be a mapping, got {type(data).__name__}")

        unknown = sorted(set(data) - set(_CONFIG_KEYS) - {"spk_id"})
        if unknown:
            raise ConfigError(f"Unknown orbit keys: {', '.join(unknown)}")

        fields: dict[str, Any] = {}
        for key, field_name in _CONFIG_KEYS.items():
            if key not in data:
                continue
            value = data[key]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"'{key}' must be a number, got {value!r}")
            try:
                fields[field_name] = float(value)
            except OverflowError:
                raise ConfigError(f"'{key}' is out of range for a float") from None

        # null counts as absent
        spk_id = data.get("spk_id")
        if spk_id is None:
            spk_id = default_spk_id
        if spk_id is not None and (isinstance(spk_id, bool) or not isinstance(spk_id, int)):
            raise ConfigError(f"'spk_id' must be an integer, got {spk_id!r}")

        return cls(spk_id=spk_id, **fields)


@dataclass(frozen=True)
class OrbitState:
    """Resolved bound elliptical orbit.

    Construction validates the invariants; an OrbitState that exists
    is always a consistent ellipse.
    """
    rp: float   # periapsis radius (km)
    ra: float   # apoapsis radius (km)
    mu: float   # gravitational parameter (km³/s²)
    h: float    # specific angular momentum (km²/s)
    ecc: float  # eccentricity

    def __post_init__(self) -> None:
        for name in ("rp", "ra", "mu", "h", "ecc"):
            if not math.isfinite(getattr(self, name)):
                raise InvalidOrbit(f"{name} must be finite, got {getattr(self, name)}")
        if self.mu <= 0:
            raise InvalidOrbit(f"mu must be positive, got {self.mu}")
        if self.rp <= 0:
            raise InvalidOrbit(f"Periapsis must be positive, got {self.rp}")
        if self.ra < self.rp:
            raise InvalidOrbit(
                f"Apoapsis {self.ra} is below periapsis {self.rp}"
            )
        if self.h <= 0:
            raise InvalidOrbit(f"Angular momentum must be positive, got {self.h}")
        if not 0.0 <= self.ecc < 1.0:
            raise InvalidOrbit(
                f"Only bound elliptical orbits are supported (0 <= ecc < 1), got {self.ecc}"
            )
        expected = (self.ra - self.rp) / (self.ra + self.rp)
        if not math.isclose(self.ecc, expected, rel_tol=1e-6, abs_tol=1e-9):
            raise InvalidOrbit(
                f"Eccentricity {self.ecc} inconsistent with apsides (expected {expected})"
            )

    @property
    def semi_major_axis(self) -> float:
        return (self.rp + self.ra) / 2.0

    @property
    def specific_energy(self) -> float:
        """Specific orbital energy -mu/(2a) (km²/s²)."""
        return -self.mu / (2.0 * self.semi_major_axis)

    def period(self) -> float:
        """Orbital period (s) from Kepler's third law."""
        if self.mu <= 0:
            raise InvalidOrbit(f"mu must be positive, got {self.mu}")
        return float(2.0 * np.pi / np.sqrt(self.mu) * self.semi_major_axis ** 1.5)

    def apsis_velocities(self) -> tuple[float, float]:
        """Speeds at the apsides.

        Returns:
            (v_apoapsis, v_periapsis) in km/s.
        """
        return self.h / self.ra, self.h / self.rp

