#!/usr/bin/env python3
"""Transfer sweep example: Hohmann cost from LEO to a range of circular orbits.

Resolves each target from a different parameter pair to show that the
resolver accepts any supported combination, then prints delta-V and
transfer time for each.

Usage:
    python examples/transfer_sweep.py
"""
from apsis import OrbitSpec, TransferRequest, lookup, plan_mission


def main():
    mu = lookup(3)
    origin = OrbitSpec(rp=6678.0, ra=6678.0, spk_id=3)

    print(f"{'target km':>10}  {'burn1':>9}  {'burn2':>9}  {'total':>9}  {'hours':>7}")
    for radius in (8000.0, 12000.0, 20000.0, 26560.0, 42164.0, 384400.0):
        # Circular target given by apoapsis + apoapsis speed
        target = OrbitSpec(ra=radius, va=(mu / radius) ** 0.5, spk_id=3)
        report = plan_mission(TransferRequest(orbit1=origin, orbit2=target))
        dv = report.delta_v
        print(
            f"{radius:10.0f}  {dv.burn1:9.4f}  {dv.burn2:9.4f}  "
            f"{dv.total:9.4f}  {report.transfer_time_s / 3600.0:7.2f}"
        )


if __name__ == "__main__":
    main()
