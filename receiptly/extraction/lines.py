MAX_CANDIDATE_LINES = 50


def normalize_lines(text: str | None, max_lines: int = MAX_CANDIDATE_LINES) -> list[str]:
    """Split raw OCR text into trimmed, non-empty lines.

    Only the first ``max_lines`` surviving lines are kept so the
    categorization request stays bounded.
    """
    if not text:
        return []
    lines = (line.strip() for line in text.splitlines())
    return [line for line in lines if line][:max_lines]
