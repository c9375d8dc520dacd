#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the command-line interface

Synthetic tables are written as ASCII ACE files so that every command runs
end to end through the ``endf`` loader.
"""

from __future__ import annotations

import pytest

from pyndl.cli import build_parser, main


@pytest.fixture
def ace_path(ace_file):
    """Write a table stand-in as an ASCII ACE file and return its path"""
    return lambda table: str(ace_file(table))


class TestParser:
    """Tests for argument parsing"""

    def test_bragg_energies(self) -> None:
        args = build_parser().parse_args(["bragg", "x.20t", "-e", "1e-3", "2e-3"])
        assert args.command == "bragg"
        assert args.energies == [1.0e-3, 2.0e-3]
        assert args.name is None

    def test_bragg_requires_energies(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["bragg", "x.20t"])

    def test_hdf5_overwrite(self) -> None:
        args = build_parser().parse_args(["hdf5", "x.20t", "out.h5", "--overwrite"])
        assert args.output == "out.h5"
        assert args.overwrite


class TestCommands:
    """End-to-end command runs"""

    def test_no_command_prints_help(self, capsys) -> None:
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out

    def test_bragg(self, ace_path, thermal_table, capsys) -> None:
        rc = main(["bragg", ace_path(thermal_table), "-e", "5e-3", "1e-4"])
        out = capsys.readouterr().out
        assert rc == 0
        assert "3 Bragg edges" in out
        assert "1.000000e+00" in out

    def test_laws(self, ace_path, neutron_table, capsys) -> None:
        rc = main(["laws", ace_path(neutron_table)])
        out = capsys.readouterr().out
        assert rc == 0
        assert "MT= 16" in out
        assert "MT= 91" in out

    def test_hdf5(self, tmp_path, ace_path, thermal_table, capsys) -> None:
        pytest.importorskip("h5py")
        out = tmp_path / "grph.h5"
        assert main(["hdf5", ace_path(thermal_table), str(out)]) == 0
        assert out.exists()

    def test_missing_file_returns_error(self, tmp_path, capsys) -> None:
        rc = main(["bragg", str(tmp_path / "missing.20t"), "-e", "1.0"])
        assert rc == 1
        assert "ERROR" in capsys.readouterr().out
