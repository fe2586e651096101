# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Transfer report writers.

Plain-text and JSON renderings of a TransferReport. Values are written
in the units the domain computes them in (km, km/s, s).
"""
import json
import logging
from dataclasses import asdict
from typing import Any

from apsis.domain.mission import TransferReport
from apsis.domain.orbit_state import OrbitState
from apsis.ports import ReportExporter

logger = logging.getLogger(__name__)


def orbit_to_dict(state: OrbitState) -> dict[str, float]:
    """Orbit fields plus derived period and apsis speeds."""
    v_apo, v_peri = state.apsis_velocities()
    return {
        **asdict(state),
        'semi_major_axis': state.semi_major_axis,
        'specific_energy': state.specific_energy,
        'period_s': state.period(),
        'v_periapsis': v_peri,
        'v_apoapsis': v_apo,
    }


def report_to_dict(report: TransferReport) -> dict[str, Any]:
    return {
        'body': report.body_name,
        'direction': report.direction.value,
        'orbit1': orbit_to_dict(report.origin),
        'orbit2': orbit_to_dict(report.destination),
        'transfer': orbit_to_dict(report.transfer),
        'delta_v': asdict(report.delta_v),
        'transfer_time_s': report.transfer_time_s,
    }


def format_orbit(label: str, state: OrbitState) -> list[str]:
    v_apo, v_peri = state.apsis_velocities()
    return [
        f"{label}:",
        f"  periapsis         {state.rp:14.3f} km",
        f"  apoapsis          {state.ra:14.3f} km",
        f"  eccentricity      {state.ecc:14.6f}",
        f"  angular momentum  {state.h:14.3f} km²/s",
        f"  specific energy   {state.specific_energy:14.6f} km²/s²",
        f"  period            {state.period():14.3f} s",
        f"  v periapsis       {v_peri:14.6f} km/s",
        f"  v apoapsis        {v_apo:14.6f} km/s",
    ]


def format_report(report: TransferReport) -> str:
    lines = [f"Central body: {report.body_name}"]
    lines += format_orbit("Orbit 1", report.origin)
    lines += format_orbit("Orbit 2", report.destination)
    lines += format_orbit(f"Transfer ({report.direction.value})", report.transfer)
    dv = report.delta_v
    lines += [
        "Delta-V:",
        f"  burn 1            {dv.burn1:+14.6f} km/s",
        f"  burn 2            {dv.burn2:+14.6f} km/s",
        f"  total             {dv.total:14.6f} km/s",
        f"Transfer time       {report.transfer_time_s:14.3f} s",
    ]
    return "\n".join(lines)


class TextReportExporter(ReportExporter):
    """Writes the human-readable report."""

    def export(self, report: TransferReport, path: str) -> None:
        logger.info("Writing text report %s", path)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(format_report(report))
            f.write("\n")


class JsonReportExporter(ReportExporter):
    """Writes the report as JSON."""

    def export(self, report: TransferReport, path: str) -> None:
        logger.info("Writing JSON report %s", path)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(report_to_dict(report), f, indent=2, ensure_ascii=False)
