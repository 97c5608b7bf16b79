"""
Shared constants for profile picture uploads.

Used by the picture storage and the user controller.
"""

# Multipart field carrying the picture
PICTURE_FIELD_NAME = "picture"

ALLOWED_PICTURE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png"})

UPLOAD_CHUNK_SIZE = 1024 * 1024
