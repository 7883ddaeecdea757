"""Optional export helpers for trajectory tables.

Requires the `charts` extra (pandas).
"""
