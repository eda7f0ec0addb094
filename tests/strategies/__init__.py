"""Hypothesis strategies for lingoresolve property-based tests."""
