"""Crew job definitions and hiring."""

__version__ = "0.1.0"
