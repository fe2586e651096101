# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Transfer config file adapters.

Reads a transfer request from TOML or JSON. Both formats carry two
tables, orbit1 and orbit2, plus an optional top-level spk_id used
when an orbit table does not name its own body:

    spk_id = 3

    [orbit1]
    peri = 6678
    apo = 6678

    [orbit2]
    peri = 6678
    ecc = 0.7
"""
import json
import logging
import tomllib
from pathlib import Path
from typing import Any

from apsis.domain.errors import ConfigError
from apsis.domain.mission import TransferRequest
from apsis.domain.orbit_state import OrbitSpec
from apsis.ports import ConfigReader

logger = logging.getLogger(__name__)

_ORBIT_TABLES = ("orbit1", "orbit2")


def request_from_mapping(data: dict[str, Any]) -> TransferRequest:
    """Build a TransferRequest from a parsed config document.

    Raises:
        ConfigError: If a table is missing or malformed.
    """
    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a table, got {type(data).__name__}")

    default_spk_id = data.get("spk_id")
    specs = []
    for table in _ORBIT_TABLES:
        if table not in data:
            raise ConfigError(f"Config is missing the [{table}] table")
        orbit = data[table]
        own_spk_id = orbit.get("spk_id") if isinstance(orbit, dict) else None
        if default_spk_id is not None and own_spk_id is None:
            logger.debug("[%s] uses file-level spk_id=%s", table, default_spk_id)
        try:
            specs.append(OrbitSpec.from_mapping(orbit, default_spk_id=default_spk_id))
        except ConfigError as e:
            raise ConfigError(f"[{table}] {e}") from e
    return TransferRequest(orbit1=specs[0], orbit2=specs[1])


class TomlConfigReader(ConfigReader):
    """Reads transfer requests from TOML files."""

    def read_request(self, path: str) -> TransferRequest:
        logger.info("Reading TOML config %s", path)
        with open(path, 'rb') as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"Invalid TOML in {path}: {e}") from e
        return request_from_mapping(data)


class JsonConfigReader(ConfigReader):
    """Reads transfer requests from JSON files."""

    def read_request(self, path: str) -> TransferRequest:
        logger.info("Reading JSON config %s", path)
        with open(path, encoding='utf-8') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(f"Invalid JSON in {path}: {e}") from e
        return request_from_mapping(data)


_READERS = {
    '.toml': TomlConfigReader,
    '.json': JsonConfigReader,
}


def reader_for_path(path: str) -> ConfigReader:
    """Pick a config reader from the file suffix."""
    suffix = Path(path).suffix.lower()
    try:
        return _READERS[suffix]()
    except KeyError:
        raise ConfigError(
            f"Unsupported config format '{suffix or path}' (expected .toml or .json)"
        ) from None
