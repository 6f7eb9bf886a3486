from datetime import datetime

import pytest

from src.analysis.service import parse_analysis, stamp_metadata, strip_code_fences
from src.app.errors import ResultParseError


@pytest.mark.parametrize(
    "text",
    [
        '```json\n{"a": 1}\n```',
        '```\n{"a": 1}\n```',
        '  ```json{"a": 1}```  ',
        '{"a": 1}',
        '\n{"a": 1}\n',
    ],
)
def test_strip_code_fences(text):
    assert strip_code_fences(text) == '{"a": 1}'


def test_strip_keeps_inner_backticks():
    inner = '{"note": "use ``` for code"}'
    assert strip_code_fences("```json\n" + inner + "\n```") == inner


def test_parse_analysis_returns_object_unchanged():
    text = '```json\n{"ticker": "AAPL", "executive_summary": {"key_risks": ["a", "b"]}}\n```'
    assert parse_analysis(text) == {"ticker": "AAPL", "executive_summary": {"key_risks": ["a", "b"]}}


def test_parse_failure_keeps_first_500_chars():
    text = "not json " * 100
    with pytest.raises(ResultParseError) as info:
        parse_analysis(text)
    assert info.value.raw_response == text.strip()[:500]
    assert info.value.body()["rawResponse"] == text.strip()[:500]
    assert info.value.status_code == 500


@pytest.mark.parametrize("text", ['"just a string"', "42", "null", "[]"])
def test_parse_rejects_non_objects(text):
    with pytest.raises(ResultParseError):
        parse_analysis(text)


def test_stamp_metadata():
    result = stamp_metadata({"ticker": "MSFT"})
    assert result["ticker"] == "MSFT"
    assert isinstance(result["id"], int) and result["id"] > 0
    assert result["created_at"].endswith("Z")
    created = datetime.fromisoformat(result["created_at"].replace("Z", "+00:00"))
    assert created.tzinfo is not None


def test_stamped_ids_do_not_go_backwards():
    first = stamp_metadata({})["id"]
    second = stamp_metadata({})["id"]
    assert second >= first
