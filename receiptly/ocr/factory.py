from receiptly.config.settings import Settings
from receiptly.logging.events import BaseEventSink
from receiptly.ocr.base import BaseOcrEngine
from receiptly.ocr.tesseract_adapter import TesseractAdapter


class OcrEngineFactory:
    """Creates the configured OCR engine adapter."""

    ENGINES: dict[str, type[TesseractAdapter]] = {
        "tesseract": TesseractAdapter,
    }

    @classmethod
    def create(
        cls,
        settings: Settings,
        events: BaseEventSink | None = None,
    ) -> BaseOcrEngine:
        engine = settings.ocr_engine.lower()
        adapter_cls = cls.ENGINES.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown OCR engine '{engine}'. Choose from: {list(cls.ENGINES)}"
            )
        return adapter_cls(
            language=settings.ocr_language,
            tesseract_cmd=settings.tesseract_cmd,
            events=events,
        )
