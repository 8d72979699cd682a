# Role: Turns raw model text into a JSON object. Models are told to return JSON only, but in practice they
# wrap it in code fences or add chatter around it, so parsing is defensive and never raises.

from __future__ import annotations

import json
import re
from typing import Any, Dict, Optional, Tuple

_LEADING_FENCE = re.compile(r"^```(?:json)?\s*", flags=re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"\s*```$")


def strip_code_fences(text: str) -> str:
    # Role: remove markdown fences at the very start/end only; inner backticks are left alone.
    if not text:
        return ""
    t = text.strip()
    t = _LEADING_FENCE.sub("", t, count=1)
    t = _TRAILING_FENCE.sub("", t, count=1)
    return t.strip()


def extract_json_object(text: str) -> Optional[str]:
    # Key line: first "{" to last "}" survives leading/trailing commentary.
    if not text:
        return None
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end <= start:
        return None
    return text[start : end + 1]


def parse_model_json(text: Optional[str]) -> Tuple[Optional[Dict[str, Any]], Dict[str, Any]]:
    # 1) strip code fences
    # 2) strict json.loads
    # 3) extract {...} substring as last attempt, only when (2) was not valid JSON
    raw = (text or "").strip()
    cleaned = strip_code_fences(raw)
    repaired = cleaned != raw

    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError:
        pass
    else:
        # Key line: valid JSON that is not an object is a failure, not a salvage candidate.
        if not isinstance(parsed, dict):
            return None, {"repaired": repaired, "method": "failed"}
        return parsed, {"repaired": repaired, "method": "stripped_fences" if repaired else "strict"}

    candidate = extract_json_object(cleaned)
    if candidate is not None:
        try:
            parsed = json.loads(candidate)
        except json.JSONDecodeError:
            parsed = None
        if isinstance(parsed, dict):
            return parsed, {"repaired": True, "method": "extracted_braces"}

    return None, {"repaired": repaired, "method": "failed"}
