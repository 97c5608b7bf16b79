"""
API layer for the social network backend.

Exposes HTTP endpoints under /api/v1 (auth, users and friendships).
"""
