"""
JSON recovery for model responses.

Models asked for JSON still occasionally wrap it in markdown fences, add a
sentence of prose around it, or emit LaTeX backslashes that are invalid
JSON escapes (common for formula sections). These helpers recover the
object when one is present and report failure when none is.
"""

import json
import re
from typing import Any, Dict, List, Optional

_UNICODE_ESCAPE = re.compile(r'\\u([0-9a-fA-F]{4})')
_UNICODE_PLACEHOLDER = re.compile(r'<<UNICODE_([0-9a-fA-F]{4})>>')


def strip_markdown_fences(text: str) -> str:
    """Remove ``` fence lines (with or without a language tag)."""
    text = (text or "").strip()
    if not text.startswith("```"):
        return text
    lines = [line for line in text.split("\n") if not line.strip().startswith("```")]
    return "\n".join(lines).strip()


def extract_largest_balanced_json(text: str) -> Optional[str]:
    """Extract the largest balanced JSON object from text.

    Scans for balanced braces/brackets while respecting string literals and
    escapes. Arrays are only followed to keep nesting balanced; the result
    is always an object.

    Returns:
        The largest balanced object substring, or None if not found.
    """
    if not text:
        return None

    in_string = False
    escape = False
    stack: List[str] = []
    start_idx: Optional[int] = None
    best: Optional[str] = None

    for i, ch in enumerate(text):
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
            continue

        if ch in "{[":
            if not stack:
                start_idx = i
            stack.append(ch)
            continue

        if ch in "}]":
            if not stack:
                continue
            open_ch = stack[-1]
            if (open_ch == "{" and ch == "}") or (open_ch == "[" and ch == "]"):
                stack.pop()
                if not stack and start_idx is not None:
                    candidate = text[start_idx:i + 1]
                    if candidate.startswith("{") and (best is None or len(candidate) > len(best)):
                        best = candidate
                    start_idx = None
            else:
                # Mismatched closing; reset state.
                stack.clear()
                start_idx = None

    return best


def fix_json_escapes(text: str) -> str:
    """Escape lone backslashes while preserving valid JSON escapes.

    LaTeX such as \\alpha or \\sqrt inside string values is the usual
    source of these.
    """
    # Valid JSON escapes: \", \\, \/, \b, \f, \n, \r, \t, \uXXXX
    valid_escapes = {
        '\\"': '<<QUOTE>>',
        '\\\\': '<<BACKSLASH>>',
        '\\/': '<<SLASH>>',
        '\\b': '<<BACKSPACE>>',
        '\\f': '<<FORMFEED>>',
        '\\n': '<<NEWLINE>>',
        '\\r': '<<RETURN>>',
        '\\t': '<<TAB>>',
    }

    for old, new in valid_escapes.items():
        text = text.replace(old, new)
    text = _UNICODE_ESCAPE.sub(r'<<UNICODE_\1>>', text)

    text = text.replace('\\', '\\\\')

    for old, new in valid_escapes.items():
        text = text.replace(new, old)
    return _UNICODE_PLACEHOLDER.sub(r'\\u\1', text)


def _loads_object(text: str) -> Optional[Dict[str, Any]]:
    try:
        value = json.loads(text)
    except json.JSONDecodeError:
        return None
    return value if isinstance(value, dict) else None


def parse_json_object(text: Optional[str]) -> Optional[Dict[str, Any]]:
    """Parse a JSON object from a model response with error recovery.

    Tries, in order: the fence-stripped text, the text with escapes fixed,
    the largest balanced object, and that object with escapes fixed.

    Returns:
        The parsed object, or None when the text holds no JSON object
        (including when it holds a bare array or scalar).
    """
    if not text or not text.strip():
        return None

    cleaned = strip_markdown_fences(text)

    for candidate in (cleaned, fix_json_escapes(cleaned)):
        parsed = _loads_object(candidate)
        if parsed is not None:
            return parsed

    extracted = extract_largest_balanced_json(cleaned)
    if extracted:
        for candidate in (extracted, fix_json_escapes(extracted)):
            parsed = _loads_object(candidate)
            if parsed is not None:
                return parsed

    return None

