#!/usr/bin/env python3
"""
Error taxonomy for naming requests.

Every error carries a message that can be shown to the user as-is.
"""

from __future__ import annotations

#============================================


class NamerError(RuntimeError):
	"""
	Base class for display-ready failures.
	"""

	def __init__(self, message: str, raw_text: str = "") -> None:
		super().__init__(message)
		self.raw_text = raw_text


class FileReadError(NamerError):
	"""
	Raised when the selected file cannot be read or decoded.
	"""


class UnsupportedTypeError(NamerError):
	"""
	Raised when a file falls outside every supported media category.
	"""


class ConfigurationError(NamerError):
	"""
	Raised when no API credential is configured.
	"""


class NetworkOrAuthError(NamerError):
	"""
	Raised when the model service cannot be reached or rejects the credential.
	"""


class ContentPolicyError(NamerError):
	"""
	Raised when the model stops for safety, recitation or other reasons.
	"""


class UnexpectedFormatError(NamerError):
	"""
	Raised when a model response is not a JSON array of strings.
	"""
