# -*- coding: utf-8 -*-
"""
Graph construction package.

Contains canonicalizer (order-independent, deduplicated edge sets), builder (frozen
networkx graphs), degree (degree tables) and paths (simple-path enumeration).
"""
