#!/usr/bin/env python3
"""
Prompt builders for file name suggestions.
"""

from __future__ import annotations

# Standard Library
from dataclasses import dataclass

# local repo modules
from .classifier import is_text_media_type
from .reader import DocumentContent

#============================================


MAX_SUGGESTIONS = 5
NAME_TEMPLATE = "[PROJECT_CODE]_AI_SUGGESTED_NAME_[YYYYMMDD]"
POLICY_START = "--- NAMING INSTRUCTIONS START ---"
POLICY_END = "--- NAMING INSTRUCTIONS END ---"
CONTENT_START = "--- DOCUMENT CONTENT START ---"
CONTENT_END = "--- DOCUMENT CONTENT END ---"


@dataclass(slots=True)
class SuggestionRequest:
	original_name: str
	content: DocumentContent
	policy_text: str
	today: str


@dataclass(frozen=True, slots=True)
class TextPrompt:
	text: str


@dataclass(frozen=True, slots=True)
class MultimodalPrompt:
	"""
	Binary file part plus a text instruction part.

	Attributes:
		data: Base64 payload of the file.
		media_type: Media type of the payload.
		instruction: Text-only guidance sent after the file.
	"""
	data: str
	media_type: str
	instruction: str


PromptPayload = TextPrompt | MultimodalPrompt


#============================================


def _intro_lines() -> list[str]:
	return [
		"You are an assistant that suggests relevant, creative file names, "
		"with a focus on Traditional Chinese (繁體中文).",
	]


def _policy_lines(policy_text: str) -> list[str]:
	lines: list[str] = []
	lines.append(
		"Primary naming instructions follow. Follow them closely; they are the only "
		"source for the project code, and they also set the general style."
	)
	lines.append(POLICY_START)
	lines.append(policy_text)
	lines.append(POLICY_END)
	return lines


def _output_lines(req: SuggestionRequest) -> list[str]:
	lines: list[str] = []
	lines.append(f"Task: suggest up to {MAX_SUGGESTIONS} distinct file names.")
	lines.append(f"Original filename: \"{req.original_name}\"")
	lines.append("Use the original filename for context, keywords and existing naming patterns.")
	lines.append(f"Today's date: {req.today}")
	lines.append(f"Every name MUST follow this format exactly: {NAME_TEMPLATE}")
	lines.append(
		"- [PROJECT_CODE]: the project code or identifier taken from the naming "
		"instructions (for example, if they list [YW] as a project code, write YW)."
	)
	lines.append(
		"- AI_SUGGESTED_NAME: a concise description drawn from the document content "
		"and the original filename, written mainly in Traditional Chinese."
	)
	lines.append(
		"- Keep English words, acronyms and proper nouns exactly as written when they "
		"already matter in the instructions, filename or content (e.g. Project Alpha, "
		"Q4 report, v2, draft). Do not translate them."
	)
	lines.append("- Replace spaces with underscores (_) and keep the name valid for a file system.")
	lines.append(f"- [YYYYMMDD]: today's date, {req.today}.")
	lines.append(
		f"Example: YW_Project_Phoenix_系統更新指南_draft_{req.today}"
	)
	lines.append(
		f"Return ONLY a JSON array of strings, for example: "
		f"[\"YW_年度財務報表_Q4_report_{req.today}\", \"YW_會議紀錄_{req.today}\"]"
	)
	lines.append("Do not add any other text or markdown formatting around the array.")
	return lines


#============================================


def build_text_prompt(req: SuggestionRequest) -> TextPrompt:
	lines = _intro_lines()
	lines.append(f"Document content (media type: {req.content.media_type}):")
	lines.append(CONTENT_START)
	lines.append(req.content.payload)
	lines.append(CONTENT_END)
	lines.append("")
	lines.extend(_policy_lines(req.policy_text))
	lines.append("")
	lines.extend(_output_lines(req))
	return TextPrompt(text="\n".join(lines))


def build_multimodal_prompt(req: SuggestionRequest) -> MultimodalPrompt:
	lines = _intro_lines()
	lines.append(
		f"A file is attached (media type: {req.content.media_type}). "
		"Analyze its content and use the original filename for context."
	)
	lines.append("")
	lines.extend(_policy_lines(req.policy_text))
	lines.append("")
	lines.extend(_output_lines(req))
	return MultimodalPrompt(
		data=req.content.payload,
		media_type=req.content.media_type,
		instruction="\n".join(lines),
	)


def build_prompt(req: SuggestionRequest) -> PromptPayload:
	"""
	Build a text or multimodal prompt depending on the content media type.

	Args:
		req: Suggestion request.

	Returns:
		TextPrompt for textual content, MultimodalPrompt otherwise.
	"""
	if is_text_media_type(req.content.media_type):
		return build_text_prompt(req)
	return build_multimodal_prompt(req)


def prompt_text(payload: PromptPayload) -> str:
	"""
	Return the text part of a prompt payload.
	"""
	if isinstance(payload, MultimodalPrompt):
		return payload.instruction
	return payload.text
