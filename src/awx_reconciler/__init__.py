"""Reconcile declared AWX resources against the live AWX REST API."""

__version__ = "0.1.0"
