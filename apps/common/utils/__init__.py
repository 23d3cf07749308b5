"""Shared helpers for the API apps."""
