"""Validation predicates and serialization helpers."""
