from abc import ABC, abstractmethod
from pathlib import Path


class BaseOcrEngine(ABC):
    """Contract for all OCR engine adapters."""

    @abstractmethod
    def recognize(self, path: Path) -> str:
        """Recognize text in an image file.

        Args:
            path: Path to a scratch copy of the uploaded image.

        Returns:
            Raw recognized text, possibly empty.

        Raises:
            OcrError: on any recognition failure.
        """
