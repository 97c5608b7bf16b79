"""
Local disk storage for profile pictures.

Files are written under a generated name so that user-supplied names never
reach the filesystem; only the extension of the original name is kept.
"""

# Standard library imports
import logging
import uuid
from pathlib import Path
from typing import FrozenSet, Union

# External package imports
from fastapi import UploadFile

# Local application imports
from ...domain.constants import ALLOWED_PICTURE_EXTENSIONS, UPLOAD_CHUNK_SIZE
from ...domain.exceptions import PictureUploadError

logger = logging.getLogger(__name__)


class PictureStorage:
    """Validates uploaded pictures and streams them to the upload directory"""

    def __init__(
        self,
        upload_dir: Union[str, Path],
        max_bytes: int,
        allowed_extensions: FrozenSet[str] = ALLOWED_PICTURE_EXTENSIONS,
    ) -> None:
        self.upload_dir = Path(upload_dir)
        self.max_bytes = max_bytes
        self.allowed_extensions = allowed_extensions

    def _ensure_dir(self) -> Path:
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        return self.upload_dir

    async def save(self, upload: UploadFile) -> str:
        """
        Store an uploaded picture

        Args:
            upload: The multipart file received by the endpoint

        Returns:
            The generated filename, relative to the upload directory

        Raises:
            PictureUploadError: Missing name, unsupported extension, empty
                or oversized content, or an I/O failure while writing
        """
        if not upload.filename:
            raise PictureUploadError("Missing file name.")

        ext = Path(upload.filename).suffix.lower()
        if ext not in self.allowed_extensions:
            raise PictureUploadError(
                f"Invalid picture file. Use: {', '.join(sorted(e.lstrip('.') for e in self.allowed_extensions))}"
            )

        filename = f"{uuid.uuid4().hex}{ext}"
        final_path = self._ensure_dir() / filename

        size = 0
        try:
            with open(final_path, "wb") as f:
                while True:
                    chunk = await upload.read(UPLOAD_CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    if size > self.max_bytes:
                        raise PictureUploadError(
                            f"File too large. Max {self.max_bytes // (1024 * 1024)} MB."
                        )
                    f.write(chunk)
        except PictureUploadError:
            final_path.unlink(missing_ok=True)
            raise
        except Exception as e:
            # Interrupted read or failed write; no partial file survives
            final_path.unlink(missing_ok=True)
            logger.warning("Picture upload %s aborted: %s", filename, e)
            raise PictureUploadError(f"Could not store picture: {str(e)}")

        if size == 0:
            final_path.unlink(missing_ok=True)
            raise PictureUploadError("Empty picture file.")

        logger.info("Stored picture %s (%d bytes)", filename, size)
        return filename

    def delete(self, filename: str) -> None:
        """Remove a stored picture; missing files are ignored"""
        if not filename:
            return
        # Only plain names produced by save() are accepted
        path = self.upload_dir / Path(filename).name
        path.unlink(missing_ok=True)
        logger.info("Removed picture %s", filename)
