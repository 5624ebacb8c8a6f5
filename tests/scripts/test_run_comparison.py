# -*- coding: utf-8 -*-
"""
Module: test_run_comparison.py
Package: tests.scripts
Purpose: Tests for the comparison CLI

Tests:
- Argument defaults
- End-to-end run writing every result table
- Unreadable edge tables reported as a failed run
- Enumeration cap reported as a failed run
"""

# Standard library
import sys
from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
if str(PROJECT_ROOT / "scripts") not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT / "scripts"))

# Third-party
import pandas as pd
import pytest

# Local
import run_comparison
from netcompare.utils.config import PATH_CONFIG
from netcompare.utils.io import load_json


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def edge_files(tmp_path):
    path_a = tmp_path / "a.csv"
    path_b = tmp_path / "b.csv"
    path_a.write_text("from,to\ng1,g2\ng2,g3\n")
    path_b.write_text("from,to\ng1,g2\ng3,g2\ng3,g4\n")
    return path_a, path_b


# ============================================================================
# CLI TESTS
# ============================================================================

class TestRunComparison:
    """Tests for scripts/run_comparison.py."""

    def test_defaults(self):
        args = run_comparison.parse_args(["a.csv", "b.csv"])

        assert args.max_length == PATH_CONFIG['max_length_cutoff']
        assert args.max_paths == PATH_CONFIG['max_paths']
        assert not args.canonical_direction
        assert args.output_dir is None

    def test_end_to_end(self, edge_files, tmp_path):
        path_a, path_b = edge_files
        out_dir = tmp_path / "results"

        code = run_comparison.main([
            str(path_a), str(path_b),
            "--label-a", "GENIE3", "--label-b", "ARACNE",
            "--output-dir", str(out_dir),
        ])

        assert code == 0
        for name in ("degrees_a.csv", "degrees_b.csv", "degree_identity.csv",
                     "path_identity.csv", "summary.json"):
            assert (out_dir / name).exists()

        summary = load_json(out_dir / "summary.json")
        assert summary["label_a"] == "GENIE3"
        assert summary["edges_b"] == 3

        paths = pd.read_csv(out_dir / "path_identity.csv")
        assert paths["path_length"].tolist() == [1, 2]
        assert paths.loc[0, "percent_a"] == pytest.approx(100.0)

    def test_cap_exceeded_returns_error(self, tmp_path):
        nodes = [f"g{i}" for i in range(5)]
        rows = ["from,to"] + [f"{u},{v}" for i, u in enumerate(nodes) for v in nodes[i + 1:]]
        path = tmp_path / "k5.csv"
        path.write_text("\n".join(rows) + "\n")

        code = run_comparison.main([str(path), str(path), "--max-paths", "30"])

        assert code == 1

    def test_missing_file_returns_error(self, edge_files, tmp_path):
        path_a, _ = edge_files

        code = run_comparison.main([str(path_a), str(tmp_path / "absent.csv")])

        assert code == 1

    def test_bad_columns_returns_error(self, edge_files):
        path_a, path_b = edge_files

        code = run_comparison.main([str(path_a), str(path_b), "--source-col", "regulator"])

        assert code == 1

    def test_unrecognised_table_returns_error(self, tmp_path):
        path = tmp_path / "odd.csv"
        path.write_text("a,b\ng1,g2\n")

        assert run_comparison.main([str(path), str(path)]) == 1
