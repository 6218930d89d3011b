"""Reusable rules for PasswordGenerator.add_rule."""
