#!/usr/bin/env python3
from __future__ import annotations

from .base import GenerationResult, LLMTransport
from .gemini import GeminiTransport

__all__ = ["GenerationResult", "GeminiTransport", "LLMTransport"]
