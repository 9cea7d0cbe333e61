#!/usr/bin/env python3
"""
Decide how an uploaded file is sent to the model.
"""

from __future__ import annotations

# Standard Library
from dataclasses import dataclass

#============================================


MODE_TEXT = "text"
MODE_BINARY = "binary"
MODE_DOCX = "docx"
MODE_UNSUPPORTED = "unsupported"

TEXT_MEDIA_PREFIX = "text/"
PLAIN_TEXT = "text/plain"
OCTET_STREAM = "application/octet-stream"
PDF_MEDIA_TYPE = "application/pdf"
DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

KNOWN_TEXT_MEDIA_TYPES = frozenset({
	"application/json",
	"application/xml",
	"application/javascript",
	"application/rtf",
	"application/x-python",
	"application/x-sh",
	"application/x-csh",
	"application/x-php",
	"application/x-java-source",
	"application/x-sql",
	"application/x-httpd-php",
	"application/csv",
	"application/typescript",
	"text/csv",
	"text/markdown",
	"text/html",
	"text/css",
	"text/plain",
})
TEXT_EXTENSIONS = (
	".txt", ".md", ".markdown", ".json", ".xml", ".csv", ".html", ".htm",
	".js", ".css", ".py", ".java", ".rb", ".sh", ".php", ".ts",
)
BINARY_MEDIA_PREFIXES = ("image/", "audio/", "video/")


@dataclass(frozen=True, slots=True)
class ClassificationResult:
	mode: str
	media_type: str


#============================================


def is_text_media_type(media_type: str) -> bool:
	"""
	Check whether a declared media type is textual.
	"""
	return media_type.startswith(TEXT_MEDIA_PREFIX) or media_type in KNOWN_TEXT_MEDIA_TYPES


def _is_undeclared(media_type: str) -> bool:
	return not media_type or media_type == OCTET_STREAM


#============================================


def classify(media_type: str, file_name: str) -> ClassificationResult:
	"""
	Classify a file by declared media type and filename extension.

	Rules are checked in order and the first match wins. The extension only
	counts when the browser or OS declared nothing useful (empty or
	octet-stream).

	Args:
		media_type: Declared media type, possibly empty.
		file_name: Original filename.

	Returns:
		ClassificationResult with the handling mode and resolved media type.
	"""
	media_type = media_type or ""
	lower_name = file_name.lower()
	undeclared = _is_undeclared(media_type)
	if is_text_media_type(media_type):
		return ClassificationResult(MODE_TEXT, media_type or PLAIN_TEXT)
	if undeclared and lower_name.endswith(TEXT_EXTENSIONS):
		return ClassificationResult(MODE_TEXT, PLAIN_TEXT)
	if media_type == DOCX_MEDIA_TYPE or (undeclared and lower_name.endswith(".docx")):
		return ClassificationResult(MODE_DOCX, PLAIN_TEXT)
	if media_type.startswith(BINARY_MEDIA_PREFIXES) or media_type == PDF_MEDIA_TYPE:
		return ClassificationResult(MODE_BINARY, media_type)
	return ClassificationResult(MODE_UNSUPPORTED, media_type)
