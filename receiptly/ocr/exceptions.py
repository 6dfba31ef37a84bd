class OcrError(Exception):
    """Raised when text recognition fails for any reason."""


class OcrEngineUnavailableError(OcrError):
    """Raised when the OCR engine binary cannot be found or started."""
