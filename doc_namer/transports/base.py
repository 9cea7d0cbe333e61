#!/usr/bin/env python3
"""
Transport interface for LLM backends.
"""

from __future__ import annotations

# Standard Library
from dataclasses import dataclass
from typing import Protocol

# local repo modules
from ..llm_prompts import PromptPayload


@dataclass(slots=True)
class GenerationResult:
	text: str | None
	finish_reason: str | None = None


class LLMTransport(Protocol):
	name: str

	def generate(self, payload: PromptPayload, *, temperature: float) -> GenerationResult:
		"""
		Send a prompt asking for JSON and return the raw model reply.
		"""
