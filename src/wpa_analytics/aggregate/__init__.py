"""Aggregation helpers.

This package holds the steps every analytic shares: per-person and per-group
means, distinct-person counts, and the privacy threshold filter.
"""
