#!/usr/bin/env python3
from __future__ import annotations

# Standard Library
from dataclasses import dataclass, field
import os
from pathlib import Path

#============================================


API_KEY_ENV_VARS = ("GEMINI_API_KEY", "API_KEY")
DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TEMPERATURE = 0.6
DEFAULT_POLICY_SOURCE = "naming_ref.md"


def _default_paths() -> list[Path]:
	return []


#============================================


@dataclass(slots=True)
class AppConfig:
	"""
	Runtime configuration settings.

	Attributes:
		paths: Files to name.
		policy_source: Path or URL of the naming policy document.
		api_key: Gemini credential; None when not configured.
		model: Gemini model name.
		temperature: Sampling temperature for suggestions.
		extract_docx: Read DOCX paragraphs instead of the placeholder text.
		show_policy: Print the loaded policy before naming.
		verbose: Verbose logging.
	"""
	paths: list[Path] = field(default_factory=_default_paths)
	policy_source: str = DEFAULT_POLICY_SOURCE
	api_key: str | None = None
	model: str = DEFAULT_MODEL
	temperature: float = DEFAULT_TEMPERATURE
	extract_docx: bool = False
	show_policy: bool = False
	verbose: bool = False

	#============================================
	def normalized_paths(self) -> list[Path]:
		"""
		Normalize user file paths.

		Returns:
			List of expanded, resolved paths.
		"""
		return [path.expanduser().resolve() for path in self.paths]


#============================================
def default_policy_source(cwd: Path | None = None) -> str:
	"""
	Pick the naming policy used when none is given.

	A naming_ref.md in the working directory wins; otherwise the copy at the
	repo root next to the package is used.

	Args:
		cwd: Directory to look in first (defaults to the working directory).

	Returns:
		Path string of the policy document.
	"""
	local = (cwd or Path.cwd()) / DEFAULT_POLICY_SOURCE
	if local.is_file():
		return str(local)
	repo_copy = Path(__file__).resolve().parent.parent / DEFAULT_POLICY_SOURCE
	if repo_copy.is_file():
		return str(repo_copy)
	return DEFAULT_POLICY_SOURCE


#============================================
def load_api_key(environ: dict[str, str] | None = None) -> str | None:
	"""
	Read the Gemini credential from the environment.

	Args:
		environ: Mapping to read from (defaults to os.environ).

	Returns:
		The first non-blank value found, or None.
	"""
	source = os.environ if environ is None else environ
	for name in API_KEY_ENV_VARS:
		value = (source.get(name) or "").strip()
		if value:
			return value
	return None
