"""Turns a research prompt into a stamped analysis object."""
import json
import logging
import re
import time
from datetime import datetime, timezone
from typing import Any, Dict

from src.app.errors import InvalidRequest, ResultParseError
from src.app.schemas import AnalyzeRequest
from src.inference.anthropic_client import AnthropicClient

logger = logging.getLogger(__name__)

_LEADING_FENCE = re.compile(r"^```[A-Za-z]*[ \t]*\n?")
_TRAILING_FENCE = re.compile(r"\n?[ \t]*```$")


def strip_code_fences(text: str) -> str:
    """Remove a surrounding ```json ... ``` (or bare ```) block."""
    cleaned = text.strip()
    cleaned = _LEADING_FENCE.sub("", cleaned, count=1)
    cleaned = _TRAILING_FENCE.sub("", cleaned, count=1)
    return cleaned.strip()


def parse_analysis(text: str) -> Dict[str, Any]:
    cleaned = strip_code_fences(text)
    try:
        result = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        logger.error("JSON parse error: %s", exc)
        logger.error("Failed to parse text: %s...", cleaned[:200])
        raise ResultParseError(cleaned)
    if not isinstance(result, dict):
        logger.error("Analysis result is a %s, not an object", type(result).__name__)
        raise ResultParseError(cleaned)
    return result


def stamp_metadata(result: Dict[str, Any]) -> Dict[str, Any]:
    now = datetime.now(timezone.utc)
    result["id"] = time.time_ns() // 1_000_000
    result["created_at"] = now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return result


def analyze(request: AnalyzeRequest, client: AnthropicClient) -> Dict[str, Any]:
    if not request.is_complete():
        raise InvalidRequest()

    logger.info("Analysis request received for: %s", request.ticker)
    text = client.complete(request.research_prompt)
    result = parse_analysis(text)
    logger.info("Successfully parsed analysis result for %s", request.ticker)
    return stamp_metadata(result)
