"""
Blog API Application root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain logic (users, posts, likes) and the MongoDB infrastructure.
"""
