#!/usr/bin/env python3
"""
Selection and request state for one naming session.
"""

from __future__ import annotations

# Standard Library
from collections.abc import Callable
import logging

# local repo modules
from .errors import NamerError
from .llm_engine import SuggestionEngine
from .llm_prompts import SuggestionRequest, build_prompt
from .llm_utils import todays_date
from .policy import NamingPolicy
from .reader import DocumentContent, ReadOutcome, UploadedFile, load_document

logger = logging.getLogger(__name__)

NO_DOCUMENT_MESSAGE = (
	"Please upload a supported file first (Text, PDF, DOCX, Image, Audio, or Video)."
)

#============================================


class NamingSession:
	"""
	Holds the current selection, its content, and the last request result.

	Suggestions and an error message are never held at the same time. Every
	selection gets a token; a read outcome only lands if its token is still
	the latest one.
	"""

	#============================================
	def __init__(
		self,
		engine: SuggestionEngine,
		policy: NamingPolicy,
		*,
		extract_docx: bool = False,
		today_fn: Callable[[], str] = todays_date,
	) -> None:
		self.engine = engine
		self.policy = policy
		self.extract_docx = extract_docx
		self.today_fn = today_fn
		self.upload: UploadedFile | None = None
		self.document: DocumentContent | None = None
		self.error: str | None = None
		self.suggestions: list[str] = []
		self._token = 0

	#============================================
	def begin_selection(self, upload: UploadedFile | None) -> int:
		"""
		Start a new selection and invalidate any pending read.

		Args:
			upload: Newly selected file, or None to clear the selection.

		Returns:
			Token to pass to complete_selection().
		"""
		self._token += 1
		self.upload = upload
		self.document = None
		self.error = None
		self.suggestions = []
		return self._token

	#============================================
	def complete_selection(self, token: int, outcome: ReadOutcome) -> bool:
		"""
		Apply a read outcome if it belongs to the latest selection.

		Returns:
			True when applied, False when the outcome was stale.
		"""
		if token != self._token:
			logger.info("dropping stale read result (token %d, current %d)", token, self._token)
			return False
		if outcome.ok:
			self.document = outcome.content
			self.error = None
		else:
			self.upload = None
			self.document = None
			self.error = outcome.error
		return True

	#============================================
	def select_file(self, upload: UploadedFile | None) -> None:
		token = self.begin_selection(upload)
		if upload is None:
			return
		outcome = load_document(upload, extract_docx=self.extract_docx)
		self.complete_selection(token, outcome)

	#============================================
	def fail_selection(self, message: str) -> None:
		"""
		Record a selection that could not even be loaded.
		"""
		token = self.begin_selection(None)
		self.complete_selection(token, ReadOutcome(error=message))

	#============================================
	def submit(self) -> list[str]:
		"""
		Request suggestions for the current document.

		Returns:
			Suggestions on success, an empty list when an error was recorded.
		"""
		if self.document is None or self.upload is None:
			self.error = NO_DOCUMENT_MESSAGE
			self.suggestions = []
			return []
		self.error = None
		self.suggestions = []
		req = SuggestionRequest(
			original_name=self.upload.name,
			content=self.document,
			policy_text=self.policy.text,
			today=self.today_fn(),
		)
		try:
			names = self.engine.request_suggestions(build_prompt(req))
		except NamerError as exc:
			self.error = str(exc)
			return []
		self.suggestions = names
		return names
