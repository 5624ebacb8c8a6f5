# -*- coding: utf-8 -*-
"""
Comparison analysis

Provides:
- identity.py: Degree-1 identity between two edge sets
- degree_identity.py: Degree-vs-identity curve
- path_identity.py: Identity over simple paths of one length
- comparison_processor.py: Path-length sweep and full two-network comparison

"""
from netcompare.analysis.identity import compute_identity
from netcompare.analysis.degree_identity import compute_degree_identity
from netcompare.analysis.path_identity import compute_path_identity
from netcompare.analysis.comparison_processor import ComparisonProcessor

__all__ = [
    'compute_identity',
    'compute_degree_identity',
    'compute_path_identity',
    'ComparisonProcessor',
]
