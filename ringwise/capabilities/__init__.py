"""Capabilities document helpers."""
