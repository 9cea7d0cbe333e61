#!/usr/bin/env python3
"""
Tests for reading classified files.
"""

import base64
from pathlib import Path

import docx
import pytest

from doc_namer.classifier import ClassificationResult, MODE_BINARY, MODE_DOCX, MODE_TEXT, TEXT_EXTENSIONS, classify
from doc_namer.errors import FileReadError
from doc_namer.reader import DocumentContent, ReadOutcome, UploadedFile, load_document, read_content


def test_text_file_is_decoded():
	upload = UploadedFile(name="notes.md", media_type="text/markdown", data="會議 notes".encode("utf-8"))
	outcome = load_document(upload)
	assert outcome.ok
	assert outcome.error is None
	assert outcome.content.payload == "會議 notes"
	assert outcome.content.media_type == "text/markdown"


def test_text_decode_drops_bom():
	upload = UploadedFile(name="a.txt", media_type="", data=b"\xef\xbb\xbfhello")
	outcome = load_document(upload)
	assert outcome.content.payload == "hello"
	assert outcome.content.media_type == "text/plain"


def test_text_decode_failure_reports_read_error():
	upload = UploadedFile(name="bad.txt", media_type="text/plain", data=b"\xff\xfe\xfa")
	outcome = load_document(upload)
	assert not outcome.ok
	assert outcome.content is None
	assert outcome.error == "Error reading file: bad.txt. Please try again."


def test_binary_file_is_base64():
	data = b"\x89PNG\r\n\x1a\n\x00\x01"
	upload = UploadedFile(name="shot.png", media_type="image/png", data=data)
	outcome = load_document(upload)
	assert outcome.content.media_type == "image/png"
	assert base64.b64decode(outcome.content.payload) == data


def test_docx_placeholder_names_file():
	upload = UploadedFile(name="Plan.docx", media_type="", data=b"not really a docx")
	outcome = load_document(upload)
	assert outcome.content.media_type == "text/plain"
	assert "Plan.docx" in outcome.content.payload
	assert "placeholder" in outcome.content.payload.lower()


def test_docx_extraction_reads_paragraphs(tmp_path: Path):
	path = tmp_path / "report.docx"
	document = docx.Document()
	document.add_paragraph("Project Phoenix 更新指南")
	document.add_paragraph("")
	document.add_paragraph("Second paragraph")
	document.save(path)
	upload = UploadedFile.from_path(path)
	outcome = load_document(upload, extract_docx=True)
	assert outcome.content.payload == "Project Phoenix 更新指南\nSecond paragraph"
	assert outcome.content.media_type == "text/plain"


def test_docx_extraction_failure_reports_read_error():
	upload = UploadedFile(name="broken.docx", media_type="", data=b"garbage")
	outcome = read_content(upload, ClassificationResult(MODE_DOCX, "text/plain"), extract_docx=True)
	assert outcome.error == "Error reading file: broken.docx. Please try again."


def test_unsupported_names_type_and_file():
	upload = UploadedFile(name="bundle.zip", media_type="application/zip", data=b"PK")
	outcome = load_document(upload)
	assert outcome.content is None
	assert "application/zip" in outcome.error
	assert "bundle.zip" in outcome.error


def test_unsupported_unknown_type_message():
	upload = UploadedFile(name="mystery", media_type="", data=b"??")
	outcome = load_document(upload)
	assert "\"unknown\"" in outcome.error


def test_read_content_follows_given_classification():
	upload = UploadedFile(name="x.bin", media_type="", data=b"abc")
	text = read_content(upload, ClassificationResult(MODE_TEXT, "text/plain"))
	binary = read_content(upload, ClassificationResult(MODE_BINARY, "audio/wav"))
	assert text.content.payload == "abc"
	assert binary.content.payload == base64.b64encode(b"abc").decode("ascii")
	assert binary.content.media_type == "audio/wav"


def test_from_path_guesses_media_type(tmp_path: Path):
	path = tmp_path / "data.json"
	path.write_text("[]", encoding="utf-8")
	upload = UploadedFile.from_path(path)
	assert upload.name == "data.json"
	assert upload.media_type == "application/json"
	assert classify(upload.media_type, upload.name).mode == MODE_TEXT


def test_from_path_missing_file_raises(tmp_path: Path):
	with pytest.raises(FileReadError, match="missing.txt"):
		UploadedFile.from_path(tmp_path / "missing.txt")


@pytest.mark.parametrize("ext", TEXT_EXTENSIONS)
def test_text_extensions_from_disk_classify_as_text(tmp_path: Path, ext):
	path = tmp_path / f"source{ext}"
	path.write_text("content", encoding="utf-8")
	upload = UploadedFile.from_path(path)
	result = classify(upload.media_type, upload.name)
	assert result.mode == MODE_TEXT, (ext, upload.media_type, result)
	assert load_document(upload).content.payload == "content"


def test_read_outcome_requires_exactly_one_side():
	with pytest.raises(ValueError):
		ReadOutcome()
	with pytest.raises(ValueError):
		ReadOutcome(content=DocumentContent("x", "text/plain"), error="boom")
	assert ReadOutcome(error="boom").ok is False
