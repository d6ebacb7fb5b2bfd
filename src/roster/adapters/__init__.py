"""Adapters (concrete implementations of ROSTER interfaces)."""
