# -*- coding: utf-8 -*-
"""
I/O helpers for edge tables and comparison results

Thin adapters around the comparison core: read edge tables (CSV/TSV) into raw
(from, to) records, and write result tables and summaries. The core itself never reads
or writes files.

Examples:
# Edge tables
    from netcompare.utils.io import load_edge_table, save_table, save_json
    records = load_edge_table("data/genie3_edges.csv")

    # Results
    save_table(result.degree_curve.to_dataframe(), "out/degree_identity.csv")
    save_json(result.summary(), "out/summary.json")

"""
import json
import logging
import math
from dataclasses import asdict, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

import pandas as pd

# Config imports (direct)
from netcompare.utils.config import INPUT_CONFIG

logger = logging.getLogger(__name__)


# ============================================================================
# EDGE TABLES
# ============================================================================

def _resolve_columns(
    df: pd.DataFrame,
    source_col: Optional[str],
    target_col: Optional[str],
) -> Tuple[str, str]:
    """
    Pick the endpoint columns.

    Explicit names win, then the configured source_col/target_col pair, then each
    configured alias pair in order.
    """
    if bool(source_col) != bool(target_col):
        raise ValueError(
            f"source_col and target_col must be given together "
            f"(got source_col={source_col!r}, target_col={target_col!r})"
        )
    if source_col:
        missing = [c for c in (source_col, target_col) if c not in df.columns]
        if missing:
            raise ValueError(f"Edge table missing columns {missing}. Columns: {list(df.columns)}")
        return source_col, target_col

    candidates = [(INPUT_CONFIG['source_col'], INPUT_CONFIG['target_col'])]
    candidates += INPUT_CONFIG['column_aliases']
    for source, target in candidates:
        if source in df.columns and target in df.columns:
            return source, target
    raise ValueError(
        f"Edge table has no recognised endpoint columns "
        f"(tried {candidates}). Columns: {list(df.columns)}"
    )


def records_from_dataframe(
    df: pd.DataFrame,
    source_col: Optional[str] = None,
    target_col: Optional[str] = None,
) -> List[Tuple[str, str]]:
    """
    Convert an edge DataFrame into raw (from, to) records.

    Rows with a missing endpoint are dropped; identifiers are coerced to str.

    Args:
        df: Edge table
        source_col: Column holding 'from' endpoints (auto-detected if omitted)
        target_col: Column holding 'to' endpoints (auto-detected if omitted)

    Returns:
        List of (from, to) string tuples
    """
    source_col, target_col = _resolve_columns(df, source_col, target_col)
    edges = df[[source_col, target_col]].dropna()
    dropped = len(df) - len(edges)
    if dropped:
        logger.warning(f"Dropped {dropped} edge rows with a missing endpoint")
    edges = edges.astype(str)
    return list(zip(edges[source_col], edges[target_col]))


def load_edge_table(
    path: Union[str, Path],
    source_col: Optional[str] = None,
    target_col: Optional[str] = None,
    sep: Optional[str] = None,
) -> List[Tuple[str, str]]:
    """
    Load an edge table file as raw (from, to) records.

    Args:
        path: CSV or TSV file (separator inferred from .tsv/.txt suffix if sep omitted)
        source_col: Column holding 'from' endpoints
        target_col: Column holding 'to' endpoints
        sep: Field separator

    Returns:
        List of (from, to) string tuples
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Edge table not found: {path}")
    if sep is None:
        sep = '\t' if path.suffix.lower() in ('.tsv', '.txt') else ','

    df = pd.read_csv(path, sep=sep, dtype=str)
    records = records_from_dataframe(df, source_col, target_col)
    logger.info(f"Loaded {len(records)} edge records from {path}")
    return records


# ============================================================================
# RESULTS
# ============================================================================

def save_table(df: pd.DataFrame, path: Union[str, Path]) -> str:
    """
    Save a result table as CSV.

    Returns:
        Path string
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    logger.info(f"Saved {path} ({len(df)} rows)")
    return str(path)


def load_json(path: Union[str, Path]) -> Any:
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    logger.info(f"Loaded {path}")
    return data


def save_json(
    data: Any,
    path: Union[str, Path],
    indent: int = 2,
) -> str:
    """
    Save data to a JSON file (dataclasses and enums are converted, NaN is written as null).

    Returns:
        Path string
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w', encoding='utf-8') as f:
        json.dump(
            _nan_to_none(data), f,
            indent=indent, ensure_ascii=False, allow_nan=False, default=_serialize,
        )

    logger.info(f"Saved {path}")
    return str(path)


# ============================================================================
# HELPERS
# ============================================================================

def _nan_to_none(obj: Any) -> Any:
    """Replace float NaN with None inside dicts, lists and tuples."""
    if isinstance(obj, float) and math.isnan(obj):
        return None
    if isinstance(obj, dict):
        return {k: _nan_to_none(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_nan_to_none(v) for v in obj]
    return obj


def _serialize(obj: Any) -> Any:
    """Convert non-JSON-serializable objects."""
    if isinstance(obj, Enum):
        return obj.value
    if is_dataclass(obj) and not isinstance(obj, type):
        return _nan_to_none(asdict(obj))
    if isinstance(obj, (set, frozenset)):
        return _nan_to_none(sorted(obj, key=str))
    if hasattr(obj, 'tolist'):  # numpy scalars/arrays
        return _nan_to_none(obj.tolist())
    return str(obj)
