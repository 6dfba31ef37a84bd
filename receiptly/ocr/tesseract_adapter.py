from pathlib import Path
from typing import cast

import pytesseract
from PIL import Image, UnidentifiedImageError

from receiptly.logging.events import BaseEventSink, NullEventSink
from receiptly.ocr.base import BaseOcrEngine
from receiptly.ocr.exceptions import OcrEngineUnavailableError, OcrError


class TesseractAdapter(BaseOcrEngine):
    """Recognizes receipt text with the Tesseract binary via pytesseract."""

    # OEM 3 = default engine, PSM 6 = single uniform block of text (receipts)
    CONFIG = "--oem 3 --psm 6"

    def __init__(
        self,
        *,
        language: str = "eng",
        tesseract_cmd: str | None = None,
        events: BaseEventSink | None = None,
    ) -> None:
        self._language = language
        self._events = events if events is not None else NullEventSink()
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def recognize(self, path: Path) -> str:
        self._events.emit("ocr.started", path=str(path), language=self._language)
        try:
            with Image.open(path) as image:
                text = cast(
                    str,
                    pytesseract.image_to_string(
                        image, lang=self._language, config=self.CONFIG
                    ),
                )
        except pytesseract.TesseractNotFoundError as exc:
            raise OcrEngineUnavailableError(f"Tesseract binary not found: {exc}") from exc
        except (UnidentifiedImageError, OSError) as exc:
            raise OcrError(f"Unreadable image {path.name}: {exc}") from exc
        except pytesseract.TesseractError as exc:
            raise OcrError(f"Tesseract failed: {exc}") from exc
        except Exception as exc:
            raise OcrError(f"OCR processing failed: {exc}") from exc
        self._events.emit("ocr.completed", path=str(path), chars=len(text))
        return text
