"""Adapters - Implementations of the ports."""
