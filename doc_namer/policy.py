#!/usr/bin/env python3
"""
Load the naming policy document.
"""

from __future__ import annotations

# Standard Library
from dataclasses import dataclass
import logging
from pathlib import Path
import urllib.request

logger = logging.getLogger(__name__)

#============================================


FALLBACK_POLICY = (
	"Suggest 5 concise and relevant file names. Ensure they are suitable for typical file systems."
)


@dataclass(frozen=True, slots=True)
class NamingPolicy:
	"""
	Policy text embedded verbatim into prompts.

	Attributes:
		text: Policy text, or the fallback instruction when loading failed.
		source: Where the policy was loaded from.
		warning: Non-fatal load warning, None when the policy loaded.
	"""
	text: str
	source: str
	warning: str | None = None

	@property
	def loaded(self) -> bool:
		return self.warning is None


#============================================


def _fetch_url(url: str, timeout: float) -> str:
	request = urllib.request.Request(url, method="GET")
	with urllib.request.urlopen(request, timeout=timeout) as response:
		if response.status >= 400:
			raise RuntimeError(f"{response.status} {response.reason}")
		body = response.read()
	return body.decode("utf-8")


def load_naming_policy(source: str, timeout: float = 10.0) -> NamingPolicy:
	"""
	Read the policy from a local path or an http(s) URL.

	Args:
		source: Path or URL of the policy document.
		timeout: URL fetch timeout in seconds.

	Returns:
		NamingPolicy; on failure the fallback text plus a warning.
	"""
	try:
		if source.startswith(("http://", "https://")):
			text = _fetch_url(source, timeout)
		else:
			text = Path(source).expanduser().read_text(encoding="utf-8")
	except Exception as exc:
		warning = (
			f"Error loading naming guidelines ({source}): {exc}. "
			"Suggestions may not follow specific rules."
		)
		logger.warning("naming policy unavailable: %s", exc)
		return NamingPolicy(text=FALLBACK_POLICY, source=source, warning=warning)
	return NamingPolicy(text=text, source=source)
