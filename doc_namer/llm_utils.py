#!/usr/bin/env python3
"""
Shared LLM helpers (backend-agnostic).
"""

from __future__ import annotations

# Standard Library
from datetime import date
import sys

#============================================


INVALID_KEY_MARKER = "API key not valid"
FINISH_REASON_MESSAGES = {
	"SAFETY": (
		"The request was blocked due to safety concerns (e.g. content policy). "
		"Please modify the content or instructions."
	),
	"RECITATION": (
		"The request was blocked due to recitation concerns. Please try a different prompt."
	),
	"OTHER": (
		"The request was stopped for other reasons by the API. "
		"Run with --verbose for more details."
	),
}


def _color(text: str, code: str) -> str:
	if sys.stdout.isatty():
		return f"\033[{code}m{text}\033[0m"
	return text


def _print_llm(label: str) -> None:
	print(f"{_color('[LLM]', '36')} {label}")


#============================================


def todays_date(today: date | None = None) -> str:
	"""
	Format a date as YYYYMMDD (defaults to the local date).
	"""
	current = today or date.today()
	return current.strftime("%Y%m%d")


def normalize_finish_reason(reason: object) -> str | None:
	"""
	Turn an SDK finish-reason enum or string into an upper-case name.
	"""
	if reason is None:
		return None
	value = getattr(reason, "value", reason)
	text = str(value).split(".")[-1].strip().upper()
	return text or None


def _is_invalid_key_error(exc: BaseException) -> bool:
	return INVALID_KEY_MARKER.lower() in str(exc).lower()
