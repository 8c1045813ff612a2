"""
Structured-output parsing for tool responses.

LLMs often wrap JSON in markdown fences. The payload grammar accepted here:

    payload := [prose] "```json" body ["```" [prose]]   -> body
             | "```" [lang] body ["```"]                 -> body
             | body                                      -> body

The first ```json fence wins; without one, a leading bare fence is stripped;
otherwise the whole text is the payload.
"""

import json
import re
from dataclasses import dataclass
from typing import Generic, Optional, Type, TypeVar
from pydantic import BaseModel, ValidationError

from ..errors import ToolOutputParseError

T = TypeVar("T", bound=BaseModel)

JSON_FENCE_RE = re.compile(r"```json(.*?)(?:```|\Z)", re.DOTALL | re.IGNORECASE)
BARE_FENCE_RE = re.compile(r"\A```[A-Za-z]*\s*(.*?)\s*(?:```)?\s*\Z", re.DOTALL)


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Either a validated value or the error explaining why there is none."""
    value: Optional[T] = None
    error: Optional[ToolOutputParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.value is not None


def extract_json_payload(raw: str) -> str:
    """Return the JSON text inside the first fenced block, or the raw text."""
    match = JSON_FENCE_RE.search(raw)
    if match:
        return match.group(1).strip()

    stripped = raw.strip()
    match = BARE_FENCE_RE.match(stripped)
    if match:
        return match.group(1).strip()

    return stripped


def parse_structured_output(raw: Optional[str], model: Type[T]) -> ParseResult[T]:
    """
    Parse LLM text into `model`.

    Args:
        raw: Raw LLM response text
        model: Pydantic model describing the expected JSON object

    Returns:
        ParseResult with `value` on success, `error` otherwise. Never raises.
    """
    if not raw or not raw.strip():
        return ParseResult(error=ToolOutputParseError("Empty response from LLM"))

    payload = extract_json_payload(raw)

    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        return ParseResult(error=ToolOutputParseError(f"Response is not valid JSON: {e}"))

    if not isinstance(data, dict):
        return ParseResult(error=ToolOutputParseError(
            f"Expected a JSON object, got {type(data).__name__}"
        ))

    try:
        return ParseResult(value=model.model_validate(data))
    except ValidationError as e:
        return ParseResult(error=ToolOutputParseError(
            f"Invalid format for {model.__name__}: {e.error_count()} error(s)"
        ))
