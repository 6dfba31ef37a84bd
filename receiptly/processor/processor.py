import tempfile
from pathlib import Path

from receiptly.config.settings import Settings
from receiptly.database.repositories.receipts_repository import ReceiptsRepository
from receiptly.extraction.factory import ExtractorFactory
from receiptly.logging.events import BaseEventSink, LogEventSink, NullEventSink
from receiptly.logging.logger import Log
from receiptly.ocr.factory import OcrEngineFactory
from receiptly.processor.models import ExtractionResult, IngestionResult, PipelineState
from receiptly.processor.pipeline import PipelineContext, PipelineStep
from receiptly.processor.steps import (
    ExtractItemsStep,
    NormalizeLinesStep,
    PersistReceiptStep,
    RecognizeTextStep,
    ValidateUploadStep,
)
from receiptly.storage.scratch import ScratchStorage
from receiptly.upload.exceptions import UploadRejectedError
from receiptly.upload.models import UploadedFile


class Processor:
    """Orchestrates the ingestion of a single receipt upload.

    Pipeline: validate -> store -> recognize -> normalize -> extract ->
    clean up -> assemble -> persist.

    Only images go through OCR and extraction; other accepted media (PDF)
    are saved with no items and no raw text. OCR and extraction failures
    degrade the result instead of failing the request. The scratch file is
    released on every exit path. Persistence errors are re-raised.
    """

    def __init__(
        self,
        *,
        scratch: ScratchStorage,
        validate_step: ValidateUploadStep,
        recognize_step: RecognizeTextStep,
        normalize_step: NormalizeLinesStep,
        extract_step: ExtractItemsStep,
        persist_step: PersistReceiptStep,
        events: BaseEventSink | None = None,
    ) -> None:
        self._scratch = scratch
        self._validate_step = validate_step
        self._recognize_step = recognize_step
        self._normalize_step = normalize_step
        self._extract_step = extract_step
        self._persist_step = persist_step
        self._events = events if events is not None else NullEventSink()

    def ingest(self, upload: UploadedFile | None, caller_id: str) -> IngestionResult:
        """Run the full ingestion pipeline for one upload.

        Raises:
            UploadRejectedError: if the upload fails validation.
            PersistenceError: if the receipt record cannot be saved.
        """
        context = PipelineContext(caller_id=caller_id, upload=upload)
        self.run(context)
        self._persist_step.run(context)
        if context.result is None or context.receipt_id is None:
            raise ValueError("Pipeline finished without an assembled, saved result")
        return IngestionResult(
            receipt_id=context.receipt_id,
            raw_text=context.result.raw_text,
            items=context.result.items,
        )

    def run(self, context: PipelineContext) -> ExtractionResult:
        """Run every stage up to assembly, without persisting."""
        try:
            self._validate_step.run(context)
        except UploadRejectedError as exc:
            self._transition(context, PipelineState.REJECTED)
            Log.warning(f"Upload rejected for caller {context.caller_id}: {exc}")
            raise

        upload = context.upload
        if upload is None:
            raise ValueError("PipelineContext.upload must be set after validation")

        if upload.is_image:
            self._process_image(context, upload)
        else:
            Log.info(
                f"Skipping OCR for {upload.content_type} upload from caller {context.caller_id}"
            )

        context.result = ExtractionResult(
            raw_text=context.raw_text or None,
            items=list(context.items),
        )
        self._transition(context, PipelineState.ASSEMBLED)
        return context.result

    def _process_image(self, context: PipelineContext, upload: UploadedFile) -> None:
        steps: list[PipelineStep] = [self._normalize_step, self._extract_step]
        self._transition(context, PipelineState.STORING)
        with self._scratch.scratch_file(
            upload.content, context.caller_id, upload.filename
        ) as artifact:
            context.artifact = artifact
            try:
                self._transition(context, PipelineState.RECOGNIZING)
                self._recognize_step.run(context)
                if context.raw_text:
                    self._transition(context, PipelineState.EXTRACTING)
                    for step in steps:
                        step.run(context)
            finally:
                self._transition(context, PipelineState.CLEANING_UP)

    def _transition(self, context: PipelineContext, state: PipelineState) -> None:
        previous = context.transition(state)
        self._events.emit(
            "pipeline.state",
            caller_id=context.caller_id,
            previous=previous.value,
            state=state.value,
        )


def build_processor(
    settings: Settings,
    scratch_root: Path | None = None,
    events: BaseEventSink | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    if events is None:
        events = LogEventSink()
    if scratch_root is None:
        scratch_root = Path(tempfile.gettempdir()) / settings.scratch_dir_name
    ocr_engine = OcrEngineFactory.create(settings, events=events)
    extractor = ExtractorFactory.create(settings, events=events)
    return Processor(
        scratch=ScratchStorage(root=scratch_root),
        validate_step=ValidateUploadStep(max_size=settings.max_upload_size_bytes),
        recognize_step=RecognizeTextStep(ocr_engine),
        normalize_step=NormalizeLinesStep(max_lines=settings.max_candidate_lines),
        extract_step=ExtractItemsStep(extractor),
        persist_step=PersistReceiptStep(ReceiptsRepository()),
        events=events,
    )
