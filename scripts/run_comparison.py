#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Script: run_comparison.py
Package: scripts
Purpose: CLI interface for comparing two inferred networks

Usage:
    python scripts/run_comparison.py genie3.csv aracne.csv
    python scripts/run_comparison.py a.tsv b.tsv --label-a GENIE3 --label-b ARACNE --output-dir results/
    python scripts/run_comparison.py a.csv b.csv --max-length 4 --canonical-direction --verbose

Outputs (with --output-dir):
    degrees_a.csv, degrees_b.csv    node, degree
    degree_identity.csv             degree, percent_a, percent_b, provenance, sentinels
    path_identity.csv               path_length, percent_a, percent_b, provenance
    summary.json                    counts and degree-1 identity
"""

import sys
from pathlib import Path
import argparse

# Project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Config imports (direct)
from netcompare.utils.config import PATH_CONFIG

# Local imports
from netcompare.analysis.comparison_processor import ComparisonProcessor
from netcompare.utils.io import load_edge_table, save_json, save_table
from netcompare.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


# ============================================================================
# ARGUMENT PARSING
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        description="Compare two undirected networks by shared edges and paths",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Defaults loaded from PATH_CONFIG:
    max-length:  {PATH_CONFIG['max_length_cutoff']}
    max-paths:   {PATH_CONFIG['max_paths']}

Examples:
  python scripts/run_comparison.py a.csv b.csv
  python scripts/run_comparison.py a.csv b.csv --output-dir results/ --verbose
        """
    )

    parser.add_argument('network_a', type=str, help='Edge table of network A (CSV/TSV)')
    parser.add_argument('network_b', type=str, help='Edge table of network B (CSV/TSV)')

    parser.add_argument('--label-a', type=str, default='A', help='Display name of network A')
    parser.add_argument('--label-b', type=str, default='B', help='Display name of network B')

    parser.add_argument(
        '--source-col',
        type=str,
        default=None,
        help="Column with 'from' endpoints (default: auto-detect from/to, source/target, v1/v2)"
    )
    parser.add_argument(
        '--target-col',
        type=str,
        default=None,
        help="Column with 'to' endpoints"
    )

    parser.add_argument(
        '--max-length',
        type=int,
        default=PATH_CONFIG['max_length_cutoff'],
        help=f"Longest path length (edges) explored (default: {PATH_CONFIG['max_length_cutoff']})"
    )
    parser.add_argument(
        '--max-paths',
        type=int,
        default=PATH_CONFIG['max_paths'],
        help=f"Fail if more paths than this are enumerated (default: {PATH_CONFIG['max_paths']})"
    )
    parser.add_argument(
        '--canonical-direction',
        action='store_true',
        help='Treat a path and its reverse as the same path'
    )
    parser.add_argument(
        '--overwrite-zero-rows',
        action='store_true',
        help='Write path rows where both percentages are 0 instead of keeping the default'
    )

    parser.add_argument('--output-dir', type=str, help='Directory for result tables (optional)')
    parser.add_argument('--log-file', type=str, help='Also write logs to this file')
    parser.add_argument('--verbose', action='store_true', help='Debug logging and progress bars')

    return parser


def parse_args(argv=None):
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)


# ============================================================================
# OUTPUT
# ============================================================================

def write_outputs(result, output_dir: Path) -> None:
    """Write every result table plus the summary."""
    save_table(result.degrees_a.to_dataframe(), output_dir / "degrees_a.csv")
    save_table(result.degrees_b.to_dataframe(), output_dir / "degrees_b.csv")
    save_table(result.degree_curve.to_dataframe(), output_dir / "degree_identity.csv")
    save_table(result.path_curve.to_dataframe(), output_dir / "path_identity.csv")
    save_json(result.summary(), output_dir / "summary.json")


def print_summary(result) -> None:
    """Log a compact report."""
    logger.info("=" * 70)
    logger.info(f"{result.label_a} vs {result.label_b}")
    logger.info("=" * 70)
    for key, value in result.summary().items():
        logger.info(f"  {key:<28} {value}")

    if len(result.path_curve):
        logger.info("Path identity:")
        for row in result.path_curve:
            logger.info(
                f"  d={row.length:<3} {row.percent_a:6.1f}% / {row.percent_b:6.1f}%"
                f"  [{row.provenance.value}]"
            )


# ============================================================================
# MAIN
# ============================================================================

def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(level="DEBUG" if args.verbose else None, log_file=args.log_file)

    try:
        records_a = load_edge_table(args.network_a, args.source_col, args.target_col)
        records_b = load_edge_table(args.network_b, args.source_col, args.target_col)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Cannot read edge table: {e}")
        return 1

    processor = ComparisonProcessor(
        max_length_cutoff=args.max_length,
        max_paths=args.max_paths,
        canonical_direction=args.canonical_direction,
        overwrite_zero_rows=args.overwrite_zero_rows,
        show_progress=args.verbose,
    )

    try:
        result = processor.compare(records_a, records_b, args.label_a, args.label_b)
    except RuntimeError as e:
        logger.error(f"Comparison aborted: {e}")
        return 1

    print_summary(result)
    if args.output_dir:
        write_outputs(result, Path(args.output_dir))
    return 0


if __name__ == "__main__":
    sys.exit(main())
