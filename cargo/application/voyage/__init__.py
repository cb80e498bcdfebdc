"""Voyage module application layer."""
