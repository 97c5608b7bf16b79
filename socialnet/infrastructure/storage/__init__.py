from .picture_storage import PictureStorage

__all__ = ["PictureStorage"]
