#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
PyNDL command-line interface

Inspection and export commands for ACE tables:

1. **bragg** — Coherent elastic cross section and scattering cosine
2. **laws**  — Energy-law chain of every secondary-neutron reaction
3. **hdf5**  — Export decoded models to HDF5

Usage
-----
::

    # Bragg scattering of graphite at a few energies (eV)
    python -m pyndl.cli bragg tsl/grph.20t --energies 1e-3 5e-3 1e-2

    # Which reactions use which energy laws
    python -m pyndl.cli laws neutron/Fe56.80c

    # Write decoded models
    python -m pyndl.cli hdf5 tsl/grph.20t h5/grph.h5 --overwrite
"""

from __future__ import annotations

import argparse
import logging
import sys
import time

from pyndl.exceptions import PyNDLError
from pyndl.utils.constants import LAW_GENERAL_EVAPORATION

logger = logging.getLogger("pyndl.cli")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_bragg(args) -> int:
    """Print coherent elastic xs and cosine at the requested energies."""
    from pyndl.models.coherent_elastic import STCoherentElastic
    from pyndl.readers.ace import ACEReader

    ace = ACEReader().read(args.ace, args.name)
    model = STCoherentElastic.from_ace(ace)
    if model.bragg_edges.size == 0:
        logger.warning("Table %s has no coherent elastic data", ace.name)

    print(f"{ace.name}: {model.bragg_edges.size} Bragg edges")
    print(f"{'E (eV)':>14s} {'xs (b)':>14s} {'mu':>10s}")
    for E in args.energies:
        mu, _ = model.sample_angle_energy(E, lambda: 0.0)
        print(f"{E:14.6e} {model.xs(E):14.6e} {mu:10.6f}")
    return 0


def cmd_laws(args) -> int:
    """List the energy laws of each reaction."""
    from pyndl.readers.ace import ACEReader, energy_law_locations

    ace = ACEReader().read(args.ace, args.name)
    if ace.is_thermal:
        logger.warning("Table %s is a thermal table; it has no energy laws", ace.name)
        return 0

    for mt, chain in sorted(energy_law_locations(ace).items()):
        laws = ", ".join(
            f"{law}{'*' if law == LAW_GENERAL_EVAPORATION else ''}@{offset}"
            for law, offset in chain
        )
        print(f"  MT={mt:3d}: {laws}")
    return 0


def cmd_hdf5(args) -> int:
    """Export decoded models to HDF5."""
    from pyndl.converters.hdf5 import create_hdf5

    out = create_hdf5(args.ace, args.output, name=args.name, overwrite=args.overwrite)
    print(f"Wrote {out}")
    return 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="pyndl",
        description="PyNDL ACE inspection CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
    python -m pyndl.cli bragg tsl/grph.20t --energies 1e-3 1e-2
    python -m pyndl.cli laws neutron/Fe56.80c
    python -m pyndl.cli hdf5 tsl/grph.20t grph.h5 --overwrite
""",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    sub = parser.add_subparsers(dest="command", help="Command to run")

    def _add_source(p: argparse.ArgumentParser) -> None:
        p.add_argument("ace", help="Path to the ACE file")
        p.add_argument("--name", default=None, help="Table name when the file holds several")

    p_bragg = sub.add_parser("bragg", help="Coherent elastic xs and cosine")
    _add_source(p_bragg)
    p_bragg.add_argument(
        "--energies", "-e",
        nargs="+",
        type=float,
        required=True,
        help="Incident energies in eV",
    )

    p_laws = sub.add_parser("laws", help="List energy laws per reaction")
    _add_source(p_laws)

    p_hdf5 = sub.add_parser("hdf5", help="Export decoded models to HDF5")
    _add_source(p_hdf5)
    p_hdf5.add_argument("output", help="Output HDF5 path")
    p_hdf5.add_argument(
        "--overwrite",
        action="store_true",
        help="Overwrite existing output file",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    t0 = time.time()

    commands = {
        "bragg": cmd_bragg,
        "laws": cmd_laws,
        "hdf5": cmd_hdf5,
    }

    try:
        rc = commands[args.command](args)
    except PyNDLError as exc:
        print(f"ERROR: {exc}")
        return 1
    elapsed = time.time() - t0
    logger.debug("Completed in %.1fs", elapsed)
    return rc


if __name__ == "__main__":
    sys.exit(main())
