from enum import Enum


class RejectionReason(str, Enum):
    """Why an upload was refused before any processing started."""

    INVALID_TYPE = "invalid_type"
    TOO_LARGE = "too_large"
    NO_FILE_PROVIDED = "no_file_provided"


class UploadRejectedError(Exception):
    """Base exception for uploads refused by validation."""

    reason: RejectionReason


class NoFileProvidedError(UploadRejectedError):
    """Raised when the request carries no file."""

    reason = RejectionReason.NO_FILE_PROVIDED


class InvalidFileTypeError(UploadRejectedError):
    """Raised when the declared media type is not allowed."""

    reason = RejectionReason.INVALID_TYPE


class FileTooLargeError(UploadRejectedError):
    """Raised when the declared size exceeds the upload ceiling."""

    reason = RejectionReason.TOO_LARGE
