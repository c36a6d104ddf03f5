"""
API layer for the Blog Backend.

Exposes HTTP endpoints under /api (auth and blogs).
"""
