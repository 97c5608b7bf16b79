"""
Social network backend root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain models, application use cases and the MongoDB infrastructure.
"""
