"""Utility to extract a JSON object from LLM responses."""

from __future__ import annotations

import json


def extract_json_object(text: str) -> dict:
    """Extract a JSON object from an LLM response.

    Tries the full text, then the text without ``` fences, then the span
    from the first '{' to the last '}'.

    Raises:
        ValueError: no JSON object could be parsed.
    """
    text = (text or "").strip()
    candidates = [text, _strip_code_fences(text)]
    start, end = text.find("{"), text.rfind("}")
    if start != -1 and end > start:
        candidates.append(text[start : end + 1])

    for candidate in candidates:
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(data, dict):
            return data

    raise ValueError(f"Could not extract JSON object from text: {text[:200]}...")


def _strip_code_fences(text: str) -> str:
    """Remove markdown code fence markers from text."""
    lines = text.split("\n")
    if lines and lines[0].strip().startswith("```"):
        lines = lines[1:]
    while lines and lines[-1].strip() in ("```", ""):
        lines = lines[:-1]
    return "\n".join(lines).strip()
