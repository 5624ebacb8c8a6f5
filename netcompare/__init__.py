# -*- coding: utf-8 -*-
"""
Network comparison package.

Compares two undirected networks (e.g. gene-regulatory networks inferred by different
methods) by their shared structure: canonical edge sets, degree tables, degree-1 and
degree-conditioned identity percentages, and identity over simple paths of increasing
length.
"""
__version__ = "0.1.0"
