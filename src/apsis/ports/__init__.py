# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for configuration input and report output.

Adapters implement these to handle different file formats.
"""
from typing import Protocol, runtime_checkable

from apsis.domain.mission import TransferReport, TransferRequest


@runtime_checkable
class ConfigReader(Protocol):
    """Port for reading a transfer request from a config file."""

    def read_request(self, path: str) -> TransferRequest:
        """Read and parse a config file into a TransferRequest."""
        ...


@runtime_checkable
class ReportExporter(Protocol):
    """Port for writing a transfer report."""

    def export(self, report: TransferReport, path: str) -> None:
        """Write the report to a file."""
        ...
