"""Shared type aliases and constants."""
