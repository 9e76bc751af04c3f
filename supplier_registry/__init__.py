"""Supplier Registry: onboarding and administrator-attested verification."""

__version__ = "0.1.0"
