# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for orbit resolution and Hohmann transfers.

Usage:
    # Transfer between the two orbits of a config file
    apsis -c transfer.toml
    apsis -c transfer.json --json report.json -o report.txt

    # Resolve a single orbit (central body defaults to Earth, code 3)
    apsis --peri 6678 --ecc 0.1
    apsis --apo 42164 --va 1.2 --cb 3

    # Supported central bodies
    apsis --list-bodies
"""
import argparse
import logging
import sys

from apsis.domain.central_bodies import CENTRAL_BODIES
from apsis.domain.mission import TransferReport, plan_mission
from apsis.domain.orbit_resolver import resolve
from apsis.domain.orbit_state import OrbitSpec, OrbitState
from apsis.adapters.config_io import reader_for_path
from apsis.adapters.report_io import (
    JsonReportExporter,
    TextReportExporter,
    format_orbit,
    format_report,
)

logger = logging.getLogger(__name__)

_ORBIT_FLAGS = ('peri', 'apo', 'ecc', 'vel_p', 'vel_a')


def run(
    config_path: str,
    json_path: str | None = None,
    output_path: str | None = None,
) -> TransferReport:
    """Plan the transfer described by a config file and export it."""
    request = reader_for_path(config_path).read_request(config_path)
    report = plan_mission(request)
    if json_path:
        JsonReportExporter().export(report, json_path)
    if output_path:
        TextReportExporter().export(report, output_path)
    return report


def run_single(spec: OrbitSpec) -> OrbitState:
    """Resolve one orbit given on the command line."""
    return resolve(spec)


def _print_bodies() -> None:
    for body in CENTRAL_BODIES.values():
        print(f"{body.code:>4}  {body.name:<8}  mu = {body.mu:.6g} km³/s²")


def main():
    parser = argparse.ArgumentParser(
        description="Resolve two-body orbits and plan coplanar Hohmann transfers"
    )
    parser.add_argument(
        '--config', '-c',
        help="Transfer config (.toml or .json) with [orbit1] and [orbit2] tables"
    )
    parser.add_argument(
        '--output', '-o',
        help="Also write the text report to this file"
    )
    parser.add_argument(
        '--json',
        help="Export the transfer report as JSON"
    )
    parser.add_argument(
        '--list-bodies', action='store_true', default=False,
        help="List supported central bodies and exit"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Enable debug logging"
    )

    orbit_group = parser.add_argument_group('single orbit')
    orbit_group.add_argument(
        '--periapsis', '--peri', '-p', dest='peri', type=float,
        help="Periapsis radius (km)"
    )
    orbit_group.add_argument(
        '--apoapsis', '--apo', dest='apo', type=float,
        help="Apoapsis radius (km)"
    )
    orbit_group.add_argument(
        '--eccentricity', '--ecc', '-e', dest='ecc', type=float,
        help="Eccentricity (0 <= e < 1)"
    )
    orbit_group.add_argument(
        '--vp', dest='vel_p', type=float,
        help="Speed at periapsis (km/s)"
    )
    orbit_group.add_argument(
        '--va', dest='vel_a', type=float,
        help="Speed at apoapsis (km/s)"
    )
    orbit_group.add_argument(
        '--cb', dest='spk_id', type=int, default=None,
        help="Central body Horizons ID (default: 3, Earth; single-orbit mode only)"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_bodies:
        _print_bodies()
        return

    single_mode = any(getattr(args, flag) is not None for flag in _ORBIT_FLAGS)
    if args.config and single_mode:
        parser.error("orbit parameters cannot be combined with --config")
    if args.config and args.spk_id is not None:
        parser.error("--cb cannot be combined with --config; set spk_id in the file")
    if not args.config and not single_mode:
        parser.error("either --config or orbit parameters are required")

    try:
        if args.config:
            report = run(args.config, json_path=args.json, output_path=args.output)
            print(format_report(report))
            if args.json:
                print(f"Exported report to {args.json}")
        else:
            spec = OrbitSpec(
                rp=args.peri,
                ra=args.apo,
                ecc=args.ecc,
                vp=args.vel_p,
                va=args.vel_a,
                spk_id=args.spk_id if args.spk_id is not None else 3,
            )
            print("\n".join(format_orbit("Orbit", run_single(spec))))
    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        logger.debug("Run failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
