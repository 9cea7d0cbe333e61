#!/usr/bin/env python3
"""
Read uploaded files into text or base64 payloads.
"""

from __future__ import annotations

# Standard Library
import base64
from dataclasses import dataclass
import io
import logging
import mimetypes
from pathlib import Path

# PIP3 modules
import docx

# local repo modules
from .classifier import (
	MODE_BINARY,
	MODE_DOCX,
	MODE_TEXT,
	PLAIN_TEXT,
	ClassificationResult,
	classify,
)
from .errors import FileReadError, NamerError, UnsupportedTypeError

logger = logging.getLogger(__name__)
# built-in table only, host mime.types files are not read
_MIME_TYPES = mimetypes.MimeTypes()

#============================================


@dataclass(frozen=True, slots=True)
class UploadedFile:
	"""
	A selected file as the user handed it over.

	Attributes:
		name: Original filename (no directories).
		media_type: Declared media type, empty when unknown.
		data: Raw file bytes.
	"""
	name: str
	media_type: str
	data: bytes

	#============================================
	@classmethod
	def from_path(cls, path: Path) -> UploadedFile:
		"""
		Load a file from disk, guessing its declared type from the name.

		Args:
			path: File path.

		Returns:
			UploadedFile for the path.
		"""
		media_type = _MIME_TYPES.guess_type(path.name)[0] or ""
		try:
			data = path.read_bytes()
		except OSError as exc:
			raise FileReadError(read_error_message(path.name)) from exc
		return cls(name=path.name, media_type=media_type, data=data)


@dataclass(frozen=True, slots=True)
class DocumentContent:
	payload: str
	media_type: str


@dataclass(frozen=True, slots=True)
class ReadOutcome:
	"""
	Result of reading one selection: content or error, never both.
	"""
	content: DocumentContent | None = None
	error: str | None = None

	def __post_init__(self) -> None:
		if (self.content is None) == (self.error is None):
			raise ValueError("ReadOutcome needs exactly one of content or error.")

	@property
	def ok(self) -> bool:
		return self.content is not None


#============================================


def read_error_message(name: str) -> str:
	return f"Error reading file: {name}. Please try again."


def unsupported_message(media_type: str, name: str) -> str:
	return (
		f"Unsupported file type: \"{media_type or 'unknown'}\" for file \"{name}\". "
		"Please upload a supported Text, PDF, DOCX, Image, Audio, or Video file."
	)


def docx_placeholder(name: str) -> str:
	return (
		f"[Text content from DOCX file: {name}] "
		"(Note: this is a placeholder. The document body was not extracted; "
		"rely on the filename and naming instructions.)"
	)


#============================================


def _decode_text(upload: UploadedFile) -> str:
	try:
		return upload.data.decode("utf-8-sig")
	except UnicodeDecodeError as exc:
		raise FileReadError(read_error_message(upload.name)) from exc


def _encode_base64(upload: UploadedFile) -> str:
	return base64.b64encode(upload.data).decode("ascii")


def _extract_docx_text(upload: UploadedFile) -> str:
	"""
	Join non-empty paragraphs of a DOCX document.
	"""
	try:
		document = docx.Document(io.BytesIO(upload.data))
	except Exception as exc:
		raise FileReadError(read_error_message(upload.name)) from exc
	all_text: list[str] = []
	for paragraph in document.paragraphs:
		if paragraph.text.strip():
			all_text.append(paragraph.text.strip())
	if not all_text:
		return docx_placeholder(upload.name)
	return "\n".join(all_text)


#============================================


def read_content(
	upload: UploadedFile,
	classification: ClassificationResult,
	*,
	extract_docx: bool = False,
) -> ReadOutcome:
	"""
	Read a classified file into a payload for the prompt builder.

	Args:
		upload: Selected file.
		classification: Verdict from classify().
		extract_docx: Use python-docx instead of the placeholder for DOCX.

	Returns:
		ReadOutcome with either content or an error message.
	"""
	try:
		if classification.mode == MODE_TEXT:
			payload = _decode_text(upload)
		elif classification.mode == MODE_BINARY:
			payload = _encode_base64(upload)
		elif classification.mode == MODE_DOCX:
			if extract_docx:
				payload = _extract_docx_text(upload)
			else:
				payload = docx_placeholder(upload.name)
			return ReadOutcome(content=DocumentContent(payload, PLAIN_TEXT))
		else:
			raise UnsupportedTypeError(unsupported_message(classification.media_type, upload.name))
	except NamerError as exc:
		logger.warning("could not read %s: %s", upload.name, exc)
		return ReadOutcome(error=str(exc))
	return ReadOutcome(content=DocumentContent(payload, classification.media_type))


def load_document(upload: UploadedFile, *, extract_docx: bool = False) -> ReadOutcome:
	"""
	Classify and read a file in one step.
	"""
	classification = classify(upload.media_type, upload.name)
	logger.info(
		"%s classified as %s (%s)", upload.name, classification.mode, classification.media_type
	)
	return read_content(upload, classification, extract_docx=extract_docx)
