from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from receiptly.extraction.models import FoodItem
from receiptly.processor.models import ExtractionResult, PipelineState
from receiptly.storage.models import ScratchArtifact
from receiptly.upload.models import UploadedFile


@dataclass(slots=True)
class PipelineContext:
    caller_id: str
    upload: UploadedFile | None
    state: PipelineState = PipelineState.VALIDATING
    history: list[PipelineState] = field(
        default_factory=lambda: [PipelineState.VALIDATING]
    )
    artifact: ScratchArtifact | None = None
    raw_text: str | None = None
    lines: list[str] = field(default_factory=list)
    items: list[FoodItem] = field(default_factory=list)
    result: ExtractionResult | None = None
    receipt_id: int | None = None

    def transition(self, state: PipelineState) -> PipelineState:
        """Move to ``state`` and return the state that was left."""
        previous = self.state
        self.state = state
        self.history.append(state)
        return previous


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
