# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for TOML and JSON transfer config readers."""
import json
import logging

import pytest

from apsis.adapters.config_io import (
    JsonConfigReader,
    TomlConfigReader,
    reader_for_path,
    request_from_mapping,
)
from apsis.domain.errors import ConfigError
from apsis.domain.mission import TransferRequest
from apsis.domain.orbit_state import OrbitSpec
from apsis.ports import ConfigReader


TOML_CONFIG = """\
spk_id = 3

[orbit1]
peri = 1507
apo = 1507

[orbit2]
peri = 1507.0
apo = 39305.0
spk_id = 3
"""


class TestRequestFromMapping:

    def test_builds_request(self):
        request = request_from_mapping({
            "orbit1": {"peri": 7000, "ecc": 0.1, "spk_id": 3},
            "orbit2": {"apo": 9000, "vel_a": 6.0, "spk_id": 3},
        })
        assert request == TransferRequest(
            orbit1=OrbitSpec(rp=7000.0, ecc=0.1, spk_id=3),
            orbit2=OrbitSpec(ra=9000.0, va=6.0, spk_id=3),
        )

    def test_file_level_spk_id(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="apsis.adapters.config_io"):
            request = request_from_mapping({
                "spk_id": 301,
                "orbit1": {"peri": 2000},
                "orbit2": {"peri": 3000, "spk_id": 301},
            })
        assert request.orbit1.spk_id == 301
        assert request.orbit2.spk_id == 301
        assert any("[orbit1]" in r.getMessage() for r in caplog.records)

    def test_missing_body_left_to_resolver(self):
        request = request_from_mapping({"orbit1": {}, "orbit2": {}})
        assert request.orbit1.spk_id is None

    @pytest.mark.parametrize("missing", ["orbit1", "orbit2"])
    def test_missing_table(self, missing):
        data = {"orbit1": {}, "orbit2": {}}
        del data[missing]
        with pytest.raises(ConfigError, match=missing):
            request_from_mapping(data)

    def test_error_names_table(self):
        with pytest.raises(ConfigError, match=r"\[orbit2\].*velocity"):
            request_from_mapping({"orbit1": {}, "orbit2": {"velocity": 7.0}})

    def test_non_table_root(self):
        with pytest.raises(ConfigError):
            request_from_mapping([1, 2])


class TestTomlConfigReader:

    def test_implements_port(self):
        assert isinstance(TomlConfigReader(), ConfigReader)

    def test_reads_file(self, tmp_path):
        path = tmp_path / "transfer.toml"
        path.write_text(TOML_CONFIG, encoding="utf-8")
        request = TomlConfigReader().read_request(str(path))
        assert request.orbit1 == OrbitSpec(rp=1507.0, ra=1507.0, spk_id=3)
        assert request.orbit2 == OrbitSpec(rp=1507.0, ra=39305.0, spk_id=3)

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("[orbit1\nperi = ", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            TomlConfigReader().read_request(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            TomlConfigReader().read_request(str(tmp_path / "nope.toml"))


class TestJsonConfigReader:

    def test_implements_port(self):
        assert isinstance(JsonConfigReader(), ConfigReader)

    def test_reads_file(self, tmp_path):
        path = tmp_path / "transfer.json"
        path.write_text(json.dumps({
            "orbit1": {"peri": 7000, "vel_p": 8.0, "spk_id": 3},
            "orbit2": {"apo": 42164, "ecc": 0.0, "spk_id": 3},
        }), encoding="utf-8")
        request = JsonConfigReader().read_request(str(path))
        assert request.orbit1.vp == 8.0
        assert request.orbit2.ecc == 0.0

    def test_null_spk_id_falls_back_to_file_default(self, tmp_path):
        path = tmp_path / "transfer.json"
        path.write_text(json.dumps({
            "spk_id": 3,
            "orbit1": {"peri": 7000, "apo": 7000, "spk_id": None},
            "orbit2": {"peri": 9000, "apo": 9000},
        }), encoding="utf-8")
        request = JsonConfigReader().read_request(str(path))
        assert request.orbit1.spk_id == 3

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            JsonConfigReader().read_request(str(path))


class TestReaderForPath:

    def test_toml(self):
        assert isinstance(reader_for_path("a/transfer.toml"), TomlConfigReader)

    def test_json_case_insensitive(self):
        assert isinstance(reader_for_path("transfer.JSON"), JsonConfigReader)

    @pytest.mark.parametrize("path", ["transfer.yaml", "transfer"])
    def test_unsupported(self, path):
        with pytest.raises(ConfigError):
            reader_for_path(path)
