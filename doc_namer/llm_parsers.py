#!/usr/bin/env python3
"""
Parsers for model replies.
"""

from __future__ import annotations

# Standard Library
import json
import re

# local repo modules
from .errors import UnexpectedFormatError

#============================================


_CODE_FENCE_RE = re.compile(r"^```(\w*)?\s*\n?(.*?)\n?\s*```$", re.DOTALL)
EXPECTED_SHAPE = "Expected a JSON array of strings."


def strip_code_fence(text: str | None) -> str:
	"""
	Remove one surrounding code fence, with or without a language tag.

	Args:
		text: Raw model text.

	Returns:
		Trimmed text without the outer fence.
	"""
	if not text:
		return ""
	cleaned = text.strip()
	match = _CODE_FENCE_RE.match(cleaned)
	if match and match.group(2):
		return match.group(2).strip()
	return cleaned


def parse_suggestions(text: str | None) -> list[str]:
	"""
	Parse a model reply into a list of suggested names.

	Args:
		text: Raw model text, possibly fenced.

	Returns:
		Suggestions in the order the model gave them.
	"""
	body = strip_code_fence(text)
	try:
		parsed = json.loads(body)
	except json.JSONDecodeError as exc:
		raise UnexpectedFormatError(
			f"Response is not valid JSON ({exc.msg}). {EXPECTED_SHAPE}", raw_text=text or ""
		) from exc
	if isinstance(parsed, list) and all(isinstance(item, str) for item in parsed):
		return parsed
	if isinstance(parsed, str):
		raise UnexpectedFormatError(
			f"Received a single string from AI instead of a JSON array: \"{parsed}\". "
			"Please check the prompt for JSON array enforcement.",
			raw_text=text or "",
		)
	raise UnexpectedFormatError(
		f"Received unexpected data format from AI. {EXPECTED_SHAPE}", raw_text=text or ""
	)
