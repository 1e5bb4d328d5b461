"""Capability checks — one module per axis, each returning a ClassificationResult."""
