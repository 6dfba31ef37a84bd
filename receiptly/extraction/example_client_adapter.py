"""Example categorization client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseCategorizationClient and register the provider in ExtractorFactory.
"""

import json
from typing import ClassVar

from receiptly.extraction.client_base import BaseCategorizationClient


class ExampleClientAdapter(BaseCategorizationClient):
    """Example adapter that returns a fixed, valid item list.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[list[dict[str, str]]] = [
        {"name": "Bananas", "category": "fresh food"},
        {"name": "Baked Beans", "category": "processed food"},
    ]

    def __init__(self, response: list[dict[str, str]] | None = None) -> None:
        self._response = response if response is not None else self.DEFAULT_RESPONSE

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, max_tokens, system_prompt, user_prompt
        return json.dumps(self._response)
