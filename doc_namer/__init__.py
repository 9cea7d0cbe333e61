"""
doc_namer
=========

Suggest policy-compliant file names for documents with Gemini.
"""

__all__ = [
	"classifier",
	"config",
	"llm_engine",
	"llm_parsers",
	"llm_prompts",
	"policy",
	"reader",
	"session",
	"transports",
]
