"""AI-powered food item extractor."""

import json
import re
import time
from pathlib import Path
from typing import Any

from receiptly.extraction.base import BaseExtractor
from receiptly.extraction.client_base import BaseCategorizationClient
from receiptly.extraction.exceptions import (
    ExtractionError,
    ExtractionNetworkError,
    ExtractionResponseError,
)
from receiptly.extraction.models import FoodItem
from receiptly.extraction.prompt_loader import load_prompt_template, load_system_prompt
from receiptly.extraction.validator import filter_food_items
from receiptly.logging.events import BaseEventSink, NullEventSink
from receiptly.logging.logger import Log

_FENCE_OPEN = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_FENCE_CLOSE = re.compile(r"\s*```$")


class FoodItemExtractor(BaseExtractor):
    """Extracts and categorizes food items from OCR lines using an AI provider.

    Any failure degrades to an empty item list. The degradation reason is
    reported through the event sink:

    - ``unreachable``: network, timeout or provider API error
    - ``empty_response``: the provider answered with no content
    - ``invalid_json``: the content is not JSON
    - ``not_an_array``: the JSON is not a list
    - ``provider_error``: any other provider-side failure
    - ``unexpected``: a bug or an error nobody anticipated
    """

    def __init__(
        self,
        *,
        client: BaseCategorizationClient,
        model: str,
        temperature: float = 0.1,
        max_tokens: int = 800,
        prompt_template_path: Path | None = None,
        system_prompt_path: Path | None = None,
        events: BaseEventSink | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._system_prompt = load_system_prompt(system_prompt_path)
        self._events = events if events is not None else NullEventSink()

    def extract(self, lines: list[str]) -> list[FoodItem]:
        if not lines:
            Log.info("No lines found to process")
            return []

        started = time.monotonic()
        try:
            items = self._extract_items(lines)
        except ExtractionNetworkError as exc:
            items = self._degrade("unreachable", exc)
        except ExtractionResponseError as exc:
            items = self._degrade(exc.reason, exc)
        except ExtractionError as exc:
            items = self._degrade("provider_error", exc)
        except Exception as exc:
            items = self._degrade("unexpected", exc)

        elapsed_ms = int((time.monotonic() - started) * 1000)
        Log.info(
            f"Extraction took {elapsed_ms}ms for {len(lines)} lines: "
            f"{len(items)} food items"
        )
        return items

    def _extract_items(self, lines: list[str]) -> list[FoodItem]:
        prompt = self._build_prompt(lines)
        Log.debug(f"Extraction prompt:\n{prompt}")

        raw_response = self._call_ai(prompt)
        Log.debug(f"AI raw response:\n{raw_response}")

        parsed = self._parse_json(raw_response)
        result = filter_food_items(parsed)
        if result.rejected:
            Log.info(
                f"Items filtered out as malformed or miscategorized: {len(result.rejected)}",
                rejected=result.rejected,
            )
            self._events.emit("extraction.items_dropped", count=len(result.rejected))
        Log.info(f"Filtered {len(parsed)} items down to {len(result.items)} valid items")
        return result.items

    def _degrade(self, reason: str, exc: Exception) -> list[FoodItem]:
        Log.error(f"Food extraction failed ({reason}): {exc}")
        self._events.emit("extraction.degraded", reason=reason)
        return []

    def _build_prompt(self, lines: list[str]) -> str:
        return self._prompt_template.format(lines="\n".join(lines))

    def _call_ai(self, prompt: str) -> str:
        return self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
        )

    @staticmethod
    def _parse_json(raw: str) -> list[Any]:
        cleaned = _FENCE_OPEN.sub("", raw.strip(), count=1)
        cleaned = _FENCE_CLOSE.sub("", cleaned, count=1).strip()

        if not cleaned:
            raise ExtractionResponseError("AI returned empty response", reason="empty_response")

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise ExtractionResponseError(
                f"Invalid JSON response: {exc}", reason="invalid_json"
            ) from exc

        if not isinstance(parsed, list):
            raise ExtractionResponseError(
                f"JSON response must be an array, got {type(parsed).__name__}",
                reason="not_an_array",
            )
        return parsed
