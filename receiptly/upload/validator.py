"""Upload checks that run before any resource is acquired."""

from receiptly.upload.exceptions import (
    FileTooLargeError,
    InvalidFileTypeError,
    NoFileProvidedError,
)
from receiptly.upload.models import UploadedFile

ALLOWED_CONTENT_TYPES = frozenset(
    {"image/jpeg", "image/jpg", "image/png", "application/pdf"}
)
MAX_FILE_SIZE = 10 * 1024 * 1024


def validate_upload(
    upload: UploadedFile | None,
    max_size: int = MAX_FILE_SIZE,
) -> None:
    """Check that an upload may enter the pipeline.

    The media type is checked before the size.

    Raises:
        NoFileProvidedError: if there is no upload.
        InvalidFileTypeError: if the declared media type is not allowed.
        FileTooLargeError: if the declared size exceeds ``max_size``.
    """
    if upload is None or (not upload.content and not upload.filename):
        raise NoFileProvidedError("No file provided")
    if upload.content_type.lower() not in ALLOWED_CONTENT_TYPES:
        raise InvalidFileTypeError(
            "Invalid file type. Only images (JPG, PNG) and PDFs are allowed."
        )
    if upload.size > max_size:
        raise FileTooLargeError(
            f"File too large. Maximum size is {max_size // (1024 * 1024)}MB."
        )
