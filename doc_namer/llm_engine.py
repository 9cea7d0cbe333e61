#!/usr/bin/env python3
"""
Request file name suggestions and map every failure to one message.
"""

from __future__ import annotations

# Standard Library
from dataclasses import dataclass
import logging

# local repo modules
from .config import DEFAULT_MODEL, DEFAULT_TEMPERATURE
from .errors import (
	ConfigurationError,
	ContentPolicyError,
	NamerError,
	NetworkOrAuthError,
	UnexpectedFormatError,
)
from .llm_parsers import parse_suggestions
from .llm_prompts import PromptPayload, prompt_text
from .llm_utils import FINISH_REASON_MESSAGES, _is_invalid_key_error, _print_llm
from .transports.base import GenerationResult, LLMTransport

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = (
	"Gemini API key is not configured. Please set the GEMINI_API_KEY (or API_KEY) "
	"environment variable."
)
INVALID_KEY_MESSAGE = "Invalid Gemini API Key. Please check your configuration."
RAW_EXCERPT_CHARS = 160

#============================================


@dataclass(slots=True)
class SuggestionEngine:
	transport: LLMTransport
	api_key: str | None
	model: str = DEFAULT_MODEL
	temperature: float = DEFAULT_TEMPERATURE

	#============================================
	def request_suggestions(self, payload: PromptPayload) -> list[str]:
		"""
		Ask the model for names and validate the reply.

		Args:
			payload: Text or multimodal prompt.

		Returns:
			Suggested names exactly as returned (no dedupe, no truncation).
		"""
		if not self.api_key:
			raise ConfigurationError(MISSING_KEY_MESSAGE)
		result: GenerationResult | None = None
		try:
			_print_llm(f"asking {self.transport.name} ({self.model}) for file names")
			logger.info("prompt text is %d characters", len(prompt_text(payload)))
			result = self.transport.generate(payload, temperature=self.temperature)
			suggestions = parse_suggestions(result.text)
		except Exception as exc:
			error = self._describe_failure(exc, result)
			logger.error("suggestion request failed: %s", exc)
			if error.raw_text:
				excerpt = " ".join(error.raw_text.split())[:RAW_EXCERPT_CHARS]
				logger.info("raw reply excerpt: %s", excerpt)
			if result and result.finish_reason:
				logger.info("finish reason: %s", result.finish_reason)
			raise error from exc
		logger.info("received %d suggestion(s)", len(suggestions))
		return suggestions

	#============================================
	def _describe_failure(
		self, exc: Exception, result: GenerationResult | None
	) -> NamerError:
		raw_text = (result.text or "") if result else ""
		if isinstance(exc, UnexpectedFormatError):
			error: NamerError = UnexpectedFormatError(
				f"Failed to get suggestions from AI: {exc}", raw_text=raw_text
			)
		else:
			error = NetworkOrAuthError(
				f"Failed to get suggestions from AI: {exc}.", raw_text=raw_text
			)
		if _is_invalid_key_error(exc):
			error = NetworkOrAuthError(INVALID_KEY_MESSAGE)
		if result and result.finish_reason in FINISH_REASON_MESSAGES:
			error = ContentPolicyError(
				FINISH_REASON_MESSAGES[result.finish_reason], raw_text=raw_text
			)
		return error
