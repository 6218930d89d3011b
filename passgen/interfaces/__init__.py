"""Protocols and type aliases shared across the package."""
