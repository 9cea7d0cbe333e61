"""
Pytest config to ensure local package imports work without installation.
"""

from __future__ import annotations

import sys
from pathlib import Path


def _add_repo_root_to_path() -> None:
	"""
	Insert the repo root into sys.path for local imports.
	"""
	repo_root = Path(__file__).resolve().parent.parent
	repo_root_str = str(repo_root)
	if repo_root_str not in sys.path:
		sys.path.insert(0, repo_root_str)


_add_repo_root_to_path()

from doc_namer.transports.base import GenerationResult  # noqa: E402


class DummyTransport:
	"""
	Test-only transport returning queued replies.
	"""

	name = "Dummy"

	def __init__(self, responses=None, error: Exception | None = None, finish_reason=None):
		self.responses = list(responses or [])
		self.error = error
		self.finish_reason = finish_reason
		self.calls: list[tuple[object, float]] = []

	def generate(self, payload, *, temperature: float) -> GenerationResult:
		self.calls.append((payload, temperature))
		if self.error:
			raise self.error
		if not self.responses:
			raise RuntimeError("No response queued")
		return GenerationResult(text=self.responses.pop(0), finish_reason=self.finish_reason)
