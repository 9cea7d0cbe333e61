#!/usr/bin/env python3
"""
Gemini transport built on the google-genai SDK.
"""

from __future__ import annotations

# Standard Library
import base64
import logging

# PIP3 modules
from google import genai
from google.genai import types

# local repo modules
from ..config import DEFAULT_MODEL
from ..llm_prompts import MultimodalPrompt, PromptPayload, TextPrompt
from ..llm_utils import normalize_finish_reason
from .base import GenerationResult

logger = logging.getLogger(__name__)

JSON_MIME_TYPE = "application/json"


class GeminiTransport:
	name = "Gemini"

	def __init__(self, api_key: str, model: str = DEFAULT_MODEL, client=None) -> None:
		self.api_key = api_key
		self.model = model
		self._client = client

	@property
	def client(self):
		if self._client is None:
			self._client = genai.Client(api_key=self.api_key)
		return self._client

	def build_contents(self, payload: PromptPayload):
		if isinstance(payload, TextPrompt):
			return payload.text
		if isinstance(payload, MultimodalPrompt):
			file_part = types.Part.from_bytes(
				data=base64.b64decode(payload.data),
				mime_type=payload.media_type,
			)
			return [file_part, types.Part.from_text(text=payload.instruction)]
		raise TypeError(f"Unsupported prompt payload: {type(payload).__name__}")

	def generate(self, payload: PromptPayload, *, temperature: float) -> GenerationResult:
		response = self.client.models.generate_content(
			model=self.model,
			contents=self.build_contents(payload),
			config=types.GenerateContentConfig(
				response_mime_type=JSON_MIME_TYPE,
				temperature=temperature,
			),
		)
		finish_reason = None
		candidates = response.candidates or []
		if candidates:
			finish_reason = normalize_finish_reason(candidates[0].finish_reason)
		logger.info("Gemini finish reason: %s", finish_reason)
		return GenerationResult(text=response.text, finish_reason=finish_reason)
