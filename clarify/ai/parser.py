"""Extract a suggestion payload from free-form model output.

Model output is untrusted: it may wrap the JSON in markdown fences or
surround it with prose. Anything that doesn't parse and validate raises
SuggestionParseError.
"""

import json
import re

from pydantic import ValidationError as PydanticValidationError

from clarify.core.exceptions import ClarifyError
from clarify.core.schemas.suggestion import SuggestionPayload

_JSON_FENCE = re.compile(r"```json([\s\S]*?)```", re.IGNORECASE)
_ANY_FENCE = re.compile(r"```([\s\S]*?)```")


class SuggestionParseError(ClarifyError):
    """The generator's response could not be turned into a suggestion."""

    def __init__(self, message: str, raw: str, extracted: str) -> None:
        self.raw = raw
        self.extracted = extracted
        super().__init__(message)


def extract_json_block(content: str) -> str:
    """Pick the most likely JSON text out of a model response.

    Prefers a ```json fenced block, then any fenced block, then the span
    from the first ``{`` to the last ``}``. Falls back to the whole text.
    """
    content = content.strip()

    match = _JSON_FENCE.search(content) or _ANY_FENCE.search(content)
    if match and match.group(1).strip():
        return match.group(1).strip()

    first = content.find("{")
    last = content.rfind("}")
    if first != -1 and last > first:
        return content[first:last + 1].strip()
    return content


def parse_suggestion(content: str) -> SuggestionPayload:
    """Parse and validate a suggestion from model output.

    Raises:
        SuggestionParseError: On invalid JSON or a payload that doesn't
            match the expected shape (including out-of-range scores).
    """
    extracted = extract_json_block(content)
    try:
        data = json.loads(extracted)
    except json.JSONDecodeError as exc:
        raise SuggestionParseError(
            "AI response format invalid (JSON parse error)", content, extracted
        ) from exc

    try:
        return SuggestionPayload.model_validate(data)
    except PydanticValidationError as exc:
        raise SuggestionParseError(
            f"AI response format invalid ({exc.error_count()} schema errors)",
            content,
            extracted,
        ) from exc
