# -*- coding: utf-8 -*-
"""
Utilities package shared across the comparison pipeline.

Contains configuration defaults, logging setup, record dataclasses and edge-table /
result I/O helpers.
"""
