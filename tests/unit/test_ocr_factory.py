import pytest

from receiptly.config.settings import Settings
from receiptly.ocr.factory import OcrEngineFactory
from receiptly.ocr.tesseract_adapter import TesseractAdapter


class TestOcrEngineFactory:
    def test_creates_tesseract_adapter(self) -> None:
        engine = OcrEngineFactory.create(Settings(ocr_engine="tesseract"))
        assert isinstance(engine, TesseractAdapter)

    def test_engine_name_is_case_insensitive(self) -> None:
        engine = OcrEngineFactory.create(Settings(ocr_engine="Tesseract"))
        assert isinstance(engine, TesseractAdapter)

    def test_unknown_engine_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown OCR engine"):
            OcrEngineFactory.create(Settings(ocr_engine="easyocr"))
