# -*- coding: utf-8 -*-
"""
Module: config.py
Package: netcompare.utils
Purpose: Defaults for path enumeration, result tables and edge-table input

Values can be overridden from the environment (or a .env file):
    NETCOMPARE_MAX_LENGTH     Longest path length explored by the sweep
    NETCOMPARE_MAX_PATHS      Hard cap on paths enumerated per graph and length
    LOG_LEVEL                 Default logging level (INFO)
    DEBUG_MODE                "true" enables DEBUG logging in scripts
"""

import os
from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


# ============================================================================
# LOGGING
# ============================================================================

DEBUG_MODE = os.getenv("DEBUG_MODE", "false").lower() == "true"
LOG_LEVEL = "DEBUG" if DEBUG_MODE else os.getenv("LOG_LEVEL", "INFO")


# ============================================================================
# PATH ENUMERATION
# ============================================================================

PATH_CONFIG = {
    # Longest path (in edges) looked for when sizing the length sweep
    'max_length_cutoff': _env_int("NETCOMPARE_MAX_LENGTH", 10),

    # Enumeration fails past this many paths for one graph (never truncates)
    'max_paths': _env_int("NETCOMPARE_MAX_PATHS", 1_000_000),

    # Treat a path and its reverse as the same key
    'canonical_direction': False,
}


# ============================================================================
# RESULT TABLES
# ============================================================================

TABLE_CONFIG = {
    # Placeholder written into every degree slot before computation
    'degree_slot_default': 1.0,

    # Preallocated value of path-length slots
    'path_slot_default': 0.0,

    # Write path rows where both percentages are 0 (otherwise the default stays)
    'overwrite_zero_rows': False,
}


# ============================================================================
# EDGE TABLE INPUT
# ============================================================================

INPUT_CONFIG = {
    'source_col': 'from',
    'target_col': 'to',

    # Tried in order when the default columns are missing
    'column_aliases': [
        ('source', 'target'),
        ('v1', 'v2'),
    ],
}
