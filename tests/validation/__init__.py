"""Validation tests for written record files."""
