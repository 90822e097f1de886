"""Helpers that pull a JSON value out of free-form model output.

Models often wrap the JSON they were asked for in commentary or markdown
fences. Extraction (finding a candidate substring) is kept separate from
decoding so both steps can be checked against literal strings.
"""
import itertools
import json
import re
from typing import Any, Callable, Iterator, Optional

from foodcoach.ai.errors import ResponseParseError

_OPENERS = re.compile(r"[\[{]")
_PAIRS = {"{": "}", "[": "]"}
_NOTHING = object()


def strip_code_fences(text: str) -> str:
    """Remove common markdown code fences and leading/trailing whitespace."""
    text = re.sub(r"```(?:json|JSON)?[ \t]*\n?(.*?)```", r"\1", text, flags=re.S)
    text = re.sub(r"^```|```$", "", text.strip())
    return text.strip()


def remove_trailing_commas(text: str) -> str:
    """Remove trailing commas before a closing brace/bracket to help json.loads succeed."""
    return re.sub(r",\s*(\}|\])", r"\1", text)


def extract_json_by_balancing(text: str, start: int = 0) -> Optional[str]:
    """Return the first balanced {...} or [...] substring at or after `start`.

    Braces inside string literals are ignored. Returns None when no opener is
    found, the brackets never close, or a closer does not match its opener.
    """
    m = _OPENERS.search(text, start)
    if not m:
        return None
    begin = m.start()
    stack = []
    in_string = False
    escape = False

    for i in range(begin, len(text)):
        ch = text[i]
        if in_string:
            if escape:
                escape = False
            elif ch == "\\":
                escape = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch in "{[":
            stack.append(ch)
        elif ch in "}]":
            if _PAIRS[stack.pop()] != ch:
                return None
            if not stack:
                return text[begin:i + 1]
    return None


def iter_json_candidates(text: str) -> Iterator[str]:
    """Yield every top-level balanced {...}/[...] substring, left to right."""
    pos = 0
    while True:
        m = _OPENERS.search(text, pos)
        if not m:
            return
        candidate = extract_json_by_balancing(text, m.start())
        if candidate is None:
            pos = m.start() + 1
            continue
        yield candidate
        pos = m.start() + len(candidate)


def extract_json(text: str) -> str:
    """First balanced object/array in `text`, or the whole stripped string if there is none."""
    candidate = extract_json_by_balancing(text or "")
    return candidate if candidate is not None else (text or "").strip()


def _loads(candidate: str) -> Any:
    try:
        return json.loads(candidate)
    except json.JSONDecodeError:
        return json.loads(remove_trailing_commas(candidate))


def _candidates(text: str) -> Iterator[str]:
    """extract_json's pick, then the remaining balanced substrings, then the fence-stripped whole string."""
    seen = set()
    for candidate in itertools.chain([extract_json(text)], iter_json_candidates(text), [strip_code_fences(text)]):
        if candidate and candidate not in seen:
            seen.add(candidate)
            yield candidate


def parse_json_response(text: Optional[str], accept: Optional[Callable[[Any], bool]] = None) -> Any:
    """Decode the first well-formed JSON value found in model output.

    With `accept`, values that decode but fail the check are passed over, so a
    bracketed citation such as "[1]" in the prose does not shadow the payload
    that follows it. When no value passes, the first decodable one is returned.
    Raises ResponseParseError when nothing decodes.
    """
    text = text or ""
    fallback = _NOTHING
    for candidate in _candidates(text):
        try:
            value = _loads(candidate)
        except json.JSONDecodeError:
            continue
        if accept is None or accept(value):
            return value
        if fallback is _NOTHING:
            fallback = value

    if fallback is _NOTHING:
        raise ResponseParseError("Model output did not contain a decodable JSON value", raw=text)
    return fallback


__all__ = [
    "strip_code_fences",
    "remove_trailing_commas",
    "extract_json_by_balancing",
    "iter_json_candidates",
    "extract_json",
    "parse_json_response",
]
