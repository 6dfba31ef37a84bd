from receiptly.database.repositories.receipts_repository import ReceiptsRepository
from receiptly.extraction.base import BaseExtractor
from receiptly.extraction.lines import MAX_CANDIDATE_LINES, normalize_lines
from receiptly.logging.logger import Log
from receiptly.ocr.base import BaseOcrEngine
from receiptly.ocr.exceptions import OcrError
from receiptly.processor.pipeline import PipelineContext, PipelineStep
from receiptly.upload.validator import MAX_FILE_SIZE, validate_upload


class ValidateUploadStep(PipelineStep):
    def __init__(self, max_size: int = MAX_FILE_SIZE) -> None:
        self._max_size = max_size

    def run(self, context: PipelineContext) -> PipelineContext:
        validate_upload(context.upload, max_size=self._max_size)
        return context


class RecognizeTextStep(PipelineStep):
    """Runs OCR on the scratch copy. Failures leave ``raw_text`` unset."""

    def __init__(self, ocr_engine: BaseOcrEngine) -> None:
        self._ocr_engine = ocr_engine

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.artifact is None:
            raise ValueError("PipelineContext.artifact must be set before recognition")
        try:
            context.raw_text = self._ocr_engine.recognize(context.artifact.path)
        except OcrError as exc:
            Log.error(f"OCR processing failed for caller {context.caller_id}: {exc}")
            context.raw_text = None
            return context
        except Exception as exc:
            Log.error(
                f"Unexpected OCR failure for caller {context.caller_id}: {exc!r}"
            )
            context.raw_text = None
            return context
        Log.info(f"Recognized {len(context.raw_text)} chars for caller {context.caller_id}")
        return context


class NormalizeLinesStep(PipelineStep):
    def __init__(self, max_lines: int = MAX_CANDIDATE_LINES) -> None:
        self._max_lines = max_lines

    def run(self, context: PipelineContext) -> PipelineContext:
        context.lines = normalize_lines(context.raw_text, max_lines=self._max_lines)
        Log.info(f"Total lines found: {len(context.lines)}")
        return context


class ExtractItemsStep(PipelineStep):
    """Categorizes candidate lines. Failures leave ``items`` empty."""

    def __init__(self, extractor: BaseExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        try:
            context.items = self._extractor.extract(context.lines)
        except Exception as exc:
            Log.error(
                f"Unexpected extraction failure for caller {context.caller_id}: {exc!r}"
            )
            context.items = []
        return context


class PersistReceiptStep(PipelineStep):
    def __init__(self, receipts_repo: ReceiptsRepository) -> None:
        self._receipts_repo = receipts_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.result is None:
            raise ValueError("PipelineContext.result must be set before persist")
        context.receipt_id = self._receipts_repo.save_receipt(
            context.caller_id,
            items=context.result.items,
            raw_text=context.result.raw_text,
        )
        Log.info(f"Receipt {context.receipt_id} saved for caller {context.caller_id}")
        return context
