"""Tests for prompt template loading."""

from pathlib import Path

import pytest

from receiptly.extraction.exceptions import ExtractionError
from receiptly.extraction.prompt_loader import load_prompt_template, load_system_prompt


class TestLoadPromptTemplate:
    def test_loads_default_template(self) -> None:
        template = load_prompt_template()
        assert "{lines}" in template
        assert '"fresh food"' in template
        assert '"processed food"' in template

    def test_default_template_formats_cleanly(self) -> None:
        prompt = load_prompt_template().format(lines="EGGS 2.10")
        assert "EGGS 2.10" in prompt

    def test_loads_custom_template(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.txt"
        custom.write_text("Items: {lines}")
        assert load_prompt_template(custom) == "Items: {lines}"

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(ExtractionError, match="Failed to load prompt"):
            load_prompt_template(Path("/nonexistent/file.txt"))


class TestLoadSystemPrompt:
    def test_loads_default_system_prompt(self) -> None:
        assert load_system_prompt() == (
            "You categorize food items from receipts. Return only JSON arrays."
        )

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(ExtractionError, match="Failed to load system prompt"):
            load_system_prompt(Path("/nonexistent/system.txt"))
