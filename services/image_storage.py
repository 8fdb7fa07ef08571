import logging
import os
from dataclasses import dataclass
from typing import Optional
from uuid import uuid4

from services.errors import UploadFailed, ValidationFailed

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_TYPES = [
    "image/jpeg",
    "image/png",
    "image/webp",
    "image/gif",
]
ALLOWED_EXTENSIONS = ["jpg", "jpeg", "png", "webp", "gif"]


@dataclass
class ImageUpload:
    data: bytes
    filename: str
    content_type: Optional[str] = None


class LocalImageStorage:
    """Writes images under ``upload_dir`` and returns the URL they are served at."""

    def __init__(self, upload_dir: str, base_url: str = "", url_prefix: str = "/uploads"):
        self.upload_dir = upload_dir
        self.base_url = base_url.rstrip("/")
        self.url_prefix = url_prefix

    def upload(self, data: bytes, filename: str, content_type: Optional[str] = None) -> str:
        if not data:
            raise ValidationFailed("Empty image upload")
        if content_type and content_type not in ALLOWED_IMAGE_TYPES:
            raise ValidationFailed("Invalid file type. Only image files are allowed.")

        file_extension = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
        if file_extension not in ALLOWED_EXTENSIONS:
            raise ValidationFailed("Invalid file extension. Only image files are allowed.")

        unique_filename = f"{uuid4()}.{file_extension}"
        file_path = os.path.join(self.upload_dir, unique_filename)
        try:
            os.makedirs(self.upload_dir, exist_ok=True)
            with open(file_path, "wb") as buffer:
                buffer.write(data)
        except OSError as e:
            logger.error(f"Error saving image {filename}: {str(e)}")
            raise UploadFailed("Error saving file") from e

        return f"{self.base_url}{self.url_prefix}/{unique_filename}"

    def store(self, image: ImageUpload) -> str:
        return self.upload(image.data, image.filename, image.content_type)
