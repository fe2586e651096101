# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Gravitational parameter table.

Central bodies are keyed by their JPL Horizons / SPK identifier.
Planets use the system barycenter codes (1-8), the Moon uses 301.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from apsis.domain.errors import MissingBody, UnsupportedBody


@dataclass(frozen=True)
class CentralBody:
    """A central body and its standard gravitational parameter."""
    code: int
    name: str
    mu: float  # km³/s²


_BODIES = (
    CentralBody(code=0, name="Sun", mu=1.327e11),
    CentralBody(code=1, name="Mercury", mu=2.203e4),
    CentralBody(code=2, name="Venus", mu=3.257e5),
    CentralBody(code=3, name="Earth", mu=3.986e5),
    CentralBody(code=4, name="Mars", mu=4.305e4),
    CentralBody(code=5, name="Jupiter", mu=1.268e8),
    CentralBody(code=6, name="Saturn", mu=3.794e7),
    CentralBody(code=7, name="Uranus", mu=5.794e6),
    CentralBody(code=8, name="Neptune", mu=6.809e6),
    CentralBody(code=301, name="Moon", mu=4902.799),
)

CENTRAL_BODIES: Mapping[int, CentralBody] = MappingProxyType(
    {body.code: body for body in _BODIES}
)


def central_body(code: int | None) -> CentralBody:
    """Look up a central body by code.

    Raises:
        MissingBody: If code is None.
        UnsupportedBody: If code is not in the table.
    """
    if code is None:
        raise MissingBody()
    # bool is an int subclass
    if isinstance(code, bool) or not isinstance(code, int):
        raise UnsupportedBody(code)
    try:
        return CENTRAL_BODIES[code]
    except KeyError:
        raise UnsupportedBody(code) from None


def lookup(code: int | None) -> float:
    """Gravitational parameter (km³/s²) for a central-body code."""
    return central_body(code).mu
