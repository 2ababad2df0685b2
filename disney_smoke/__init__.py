"""Smoke tests for the public Disney characters API."""

__version__ = "0.1.0"
