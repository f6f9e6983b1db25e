"""Cached forward and reverse geocoding service."""
