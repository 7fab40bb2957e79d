"""
Common utilities shared by MCP tools.

- InputNormalizer: accept the loose argument shapes agents tend to send
- ResponseFormatter: consistent, actionable error payloads
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from pixabay_search.shared.exceptions import PixabaySearchError

logger = logging.getLogger(__name__)

_SMART_QUOTES = str.maketrans({"“": '"', "”": '"', "‘": "'", "’": "'"})
_WHITESPACE = re.compile(r"\s+")


class InputNormalizer:
    """Normalize tool arguments before they reach the application layer."""

    @staticmethod
    def normalize_query(query: Any) -> str:
        """Strip, collapse whitespace and straighten typographic quotes."""
        if query is None:
            return ""
        text = str(query).translate(_SMART_QUOTES)
        return _WHITESPACE.sub(" ", text).strip()

    @staticmethod
    def normalize_limit(
        limit: Any,
        default: int = 20,
        min_val: int = 1,
        max_val: int = 200,
    ) -> int:
        """Coerce ``limit`` to an int inside [min_val, max_val]; junk yields ``default``."""
        if limit is None or isinstance(limit, bool):
            return default
        try:
            value = int(str(limit).strip())
        except ValueError:
            logger.debug(f"Invalid limit {limit!r}, using default {default}")
            return default
        return max(min_val, min(value, max_val))

    @staticmethod
    def normalize_bool(value: Any, default: bool = False) -> bool:
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        text = str(value).strip().lower()
        if text in {"true", "1", "yes", "y", "on"}:
            return True
        if text in {"false", "0", "no", "n", "off"}:
            return False
        return default

    @staticmethod
    def normalize_label(value: Any, default: str = "") -> str:
        """Lowercased single-word label (language or category hint)."""
        if value is None:
            return default
        text = str(value).strip().lower()
        return text or default


class ResponseFormatter:
    """Format tool errors so an agent can recover from them."""

    @staticmethod
    def error(
        error: Exception | str,
        suggestion: str | None = None,
        example: str | None = None,
        tool_name: str | None = None,
        output_format: str = "markdown",
    ) -> str:
        message = str(error)
        if isinstance(error, PixabaySearchError):
            suggestion = suggestion or error.context.suggestion
            example = example or error.context.example

        if output_format == "json":
            payload: dict[str, Any] = {"success": False, "error": message}
            if suggestion:
                payload["suggestion"] = suggestion
            if example:
                payload["example"] = example
            if tool_name:
                payload["tool"] = tool_name
            return json.dumps(payload, ensure_ascii=False)

        header = f"❌ **Error in {tool_name}**" if tool_name else "❌ **Error**"
        lines = [header, "", message]
        if suggestion:
            lines += ["", f"💡 **Suggestion**: {suggestion}"]
        if example:
            lines += ["", f"📝 **Example**: `{example}`"]
        return "\n".join(lines)
