# -*- coding: utf-8 -*-
"""
Module: test_comparison_processor.py
Package: tests.analysis
Purpose: Unit tests for path identity, the path-length sweep and full comparisons

Tests:
- Path identity at length 1 agrees with degree-1 identity
- NaN percentages for empty path sets
- Sweep bound from the longest paths, default-slot policy
- Full comparison result and summary
"""

# Standard library
import math
import sys
from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Third-party
import pytest

# Local
from netcompare.analysis.comparison_processor import ComparisonProcessor
from netcompare.analysis.identity import compute_identity
from netcompare.analysis.path_identity import compute_path_identity, path_keys
from netcompare.graph.builder import build_graph
from netcompare.utils.dataclasses import Provenance


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def network_a():
    return [("g1", "g2"), ("g2", "g3")]


@pytest.fixture
def network_b():
    return [("g1", "g2"), ("g2", "g3"), ("g3", "g4")]


@pytest.fixture
def cycle4():
    return [("g1", "g2"), ("g2", "g3"), ("g3", "g4"), ("g4", "g1")]


@pytest.fixture
def complete5():
    nodes = [f"g{i}" for i in range(5)]
    return [(u, v) for i, u in enumerate(nodes) for v in nodes[i + 1:]]


@pytest.fixture
def processor():
    return ComparisonProcessor(max_length_cutoff=10, max_paths=10_000)


# ============================================================================
# PATH IDENTITY TESTS
# ============================================================================

class TestPathIdentity:
    """Tests for compute_path_identity."""

    def test_length_one_matches_edge_identity(self, network_a, network_b, cycle4):
        for a, b in ((network_a, network_b), (network_b, cycle4), (cycle4, network_a)):
            edge_report = compute_identity(a, b)
            path_report = compute_path_identity(a, b, 1)

            assert path_report.percent_a == pytest.approx(edge_report.percent_a)
            assert path_report.percent_b == pytest.approx(edge_report.percent_b)

    @pytest.mark.parametrize("canonical_direction", [False, True])
    def test_self_loop_matches_edge_identity(self, canonical_direction):
        a = [("g1", "g1"), ("g1", "g2")]
        b = [("g1", "g2")]

        path_report = compute_path_identity(a, b, 1, canonical_direction=canonical_direction)

        assert compute_identity(a, b).as_tuple() == pytest.approx((50.0, 100.0))
        assert (path_report.percent_a, path_report.percent_b) == pytest.approx((50.0, 100.0))

    def test_shared_self_loop(self):
        a = [("g1", "g1"), ("g1", "g2")]
        b = [("g1", "g1"), ("g2", "g3")]

        edge_report = compute_identity(a, b)
        path_report = compute_path_identity(a, b, 1)

        assert path_report.matched_a == 2
        assert path_report.percent_a == pytest.approx(edge_report.percent_a)
        assert path_report.percent_b == pytest.approx(edge_report.percent_b)

    def test_self_loop_absent_from_longer_paths(self):
        report = compute_path_identity([("g1", "g1"), ("g1", "g2")], [("g1", "g2")], 2)

        assert (report.paths_a, report.paths_b) == (0, 0)

    def test_length_two(self, network_a, network_b):
        report = compute_path_identity(network_a, network_b, 2)

        assert (report.paths_a, report.paths_b) == (2, 4)
        assert report.percent_a == pytest.approx(100.0)
        assert report.percent_b == pytest.approx(50.0)

    def test_direction_merging_keeps_ratio(self, network_a, network_b):
        directed = compute_path_identity(network_a, network_b, 2, canonical_direction=False)
        merged = compute_path_identity(network_a, network_b, 2, canonical_direction=True)

        assert merged.paths_a == directed.paths_a // 2
        assert merged.percent_b == pytest.approx(directed.percent_b)

    def test_path_keys_direction(self, network_a):
        graph = build_graph(network_a)

        assert path_keys(graph, 2) == {("g1", "g2", "g3"), ("g3", "g2", "g1")}
        assert path_keys(graph, 2, canonical_direction=True) == {("g1", "g2", "g3")}

    def test_no_paths_gives_nan(self):
        report = compute_path_identity([("g1", "g2")], [("g3", "g4")], 2)

        assert math.isnan(report.percent_a)
        assert math.isnan(report.percent_b)
        assert not report.is_defined

    def test_one_side_without_paths(self, network_a):
        report = compute_path_identity(network_a, [("g1", "g2")], 2)

        assert report.percent_a == 0.0
        assert math.isnan(report.percent_b)

    def test_accepts_graphs(self, network_a, network_b):
        report = compute_path_identity(build_graph(network_a), build_graph(network_b), 1)

        assert report.is_defined
        assert report.matched_a == report.matched_b == 4

    def test_cap_propagates(self, complete5):
        with pytest.raises(RuntimeError):
            compute_path_identity(complete5, complete5, 3, max_paths=50)


# ============================================================================
# PATH-LENGTH SWEEP TESTS
# ============================================================================

class TestPathIdentityCurve:
    """Tests for ComparisonProcessor.path_identity_curve."""

    def test_reference_scenario(self, processor, network_a, network_b):
        curve = processor.path_identity_curve(network_a, network_b)

        # Longest paths: 3 nodes in A, 4 in B -> sweep d = 1..2
        assert (curve.longest_a, curve.longest_b) == (3, 4)
        assert len(curve) == 2
        assert (curve.row(1).percent_a, curve.row(1).percent_b) == pytest.approx((100.0, 200 / 3))
        assert (curve.row(2).percent_a, curve.row(2).percent_b) == pytest.approx((100.0, 50.0))
        assert all(r.provenance is Provenance.COMPUTED for r in curve)

    def test_both_zero_keeps_default(self, processor):
        curve = processor.path_identity_curve([("g1", "g2")], [("g3", "g4")])

        assert len(curve) == 1
        assert curve.row(1).provenance is Provenance.DEFAULT
        assert (curve.row(1).percent_a, curve.row(1).percent_b) == (0.0, 0.0)

    def test_overwrite_zero_rows(self):
        processor = ComparisonProcessor(overwrite_zero_rows=True)
        curve = processor.path_identity_curve([("g1", "g2")], [("g3", "g4")])

        assert curve.row(1).provenance is Provenance.COMPUTED
        assert curve.row(1).percent_a == 0.0

    def test_cutoff_limits_sweep(self, cycle4):
        processor = ComparisonProcessor(max_length_cutoff=2)
        curve = processor.path_identity_curve(cycle4, cycle4)

        assert len(curve) == 2
        assert all((r.percent_a, r.percent_b) == (100.0, 100.0) for r in curve)

    def test_cycle_against_itself(self, processor, cycle4):
        curve = processor.path_identity_curve(cycle4, cycle4)

        assert (curve.longest_a, curve.longest_b) == (4, 4)
        assert len(curve) == 3

    def test_empty_network(self, processor, network_a):
        curve = processor.path_identity_curve([], network_a)

        assert len(curve) == 0
        assert curve.longest_a == 0

    def test_enumeration_cap(self, complete5):
        processor = ComparisonProcessor(max_paths=50)

        with pytest.raises(RuntimeError, match="max_paths"):
            processor.path_identity_curve(complete5, complete5)

    def test_sweep_bound_respects_cap(self, complete5):
        processor = ComparisonProcessor(max_paths=50)
        graph = build_graph(complete5)

        with pytest.raises(RuntimeError, match="Longest-path search exceeded 50"):
            processor.sweep_bound(graph, graph)

    def test_dataframe(self, processor, network_a, network_b):
        df = processor.path_identity_curve(network_a, network_b).to_dataframe()

        assert list(df.columns) == ["path_length", "percent_a", "percent_b", "provenance"]
        assert df["path_length"].tolist() == [1, 2]

    def test_invalid_settings(self):
        with pytest.raises(ValueError):
            ComparisonProcessor(max_length_cutoff=0)
        with pytest.raises(ValueError):
            ComparisonProcessor(max_paths=0)


# ============================================================================
# FULL COMPARISON TESTS
# ============================================================================

class TestCompare:
    """Tests for ComparisonProcessor.compare."""

    def test_result(self, processor, network_a, network_b):
        records_a = network_a + [("g2", "g1")]      # Reversed duplicate
        result = processor.compare(records_a, network_b, label_a="GENIE3", label_b="ARACNE")

        assert (result.edges_a, result.edges_b) == (2, 3)
        assert result.degrees_a.degrees == {"g1": 1, "g2": 2, "g3": 1}
        assert result.identity.percent_a == pytest.approx(100.0)
        assert len(result.degree_curve) == 2
        assert len(result.path_curve) == 2

    def test_summary(self, processor, network_a, network_b):
        summary = processor.compare(network_a, network_b).summary()

        assert summary["nodes_a"] == 3
        assert summary["nodes_b"] == 4
        assert summary["max_degree_b"] == 2
        assert summary["identity_a"] == "100.0"
        assert summary["degree_rows_not_applicable"] == 0
        assert summary["longest_path_b"] == 4

    def test_empty_side(self, processor, network_b):
        result = processor.compare([], network_b)

        assert not result.identity.is_computed
        assert result.summary()["identity_a"] == "NO_NODE"
        assert result.summary()["identity_b"] == "/"
        assert all(r.provenance is Provenance.NOT_APPLICABLE for r in result.degree_curve)
        assert len(result.path_curve) == 0

    def test_repeatable(self, processor, network_a, cycle4):
        first = processor.compare(network_a, cycle4)
        second = processor.compare(network_a, cycle4)

        assert first.summary() == second.summary()
        assert first.degree_curve.to_dataframe().equals(second.degree_curve.to_dataframe())
