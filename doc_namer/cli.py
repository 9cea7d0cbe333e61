#!/usr/bin/env python3
"""
Command line interface for llm-doc-namer.
"""

# Standard Library
import argparse
import logging
from pathlib import Path
import sys

# local repo modules
from .config import DEFAULT_MODEL, DEFAULT_POLICY_SOURCE, AppConfig, default_policy_source, load_api_key
from .errors import ConfigurationError, FileReadError
from .llm_engine import MISSING_KEY_MESSAGE, SuggestionEngine
from .llm_utils import _color
from .policy import NamingPolicy, load_naming_policy
from .reader import UploadedFile
from .session import NamingSession
from .transports import GeminiTransport

#============================================


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse CLI arguments.
	"""
	parser = argparse.ArgumentParser(
		description="Suggest policy-compliant file names for documents using Gemini."
	)
	parser.add_argument(
		"-p",
		"--paths",
		dest="paths",
		nargs="+",
		required=True,
		help="Files to name (required).",
	)
	parser.add_argument(
		"-n",
		"--naming-ref",
		dest="naming_ref",
		help=(
			f"Naming policy path or URL (default: {DEFAULT_POLICY_SOURCE} in the working "
			"directory, else the repo copy)."
		),
	)
	parser.add_argument(
		"-o",
		"--model",
		dest="model",
		help=f"Override Gemini model name (default {DEFAULT_MODEL}).",
	)
	parser.add_argument(
		"--docx-text",
		dest="extract_docx",
		action="store_true",
		help="Extract DOCX paragraphs with python-docx instead of sending a placeholder.",
	)
	parser.add_argument(
		"-s",
		"--show-policy",
		dest="show_policy",
		action="store_true",
		help="Print the naming policy before suggesting names.",
	)
	parser.add_argument(
		"-v",
		"--verbose",
		dest="verbose",
		action="store_true",
		help="Verbose logging.",
	)
	return parser.parse_args(argv)


#============================================


def build_config(args: argparse.Namespace) -> AppConfig:
	"""
	Build runtime config from args and the environment.
	"""
	config = AppConfig()
	config.paths = [Path(p).expanduser() for p in args.paths]
	config.policy_source = args.naming_ref or default_policy_source()
	config.api_key = load_api_key()
	if args.model:
		config.model = args.model
	config.extract_docx = args.extract_docx
	config.show_policy = args.show_policy
	config.verbose = args.verbose
	return config


#============================================


def build_engine(config: AppConfig) -> SuggestionEngine:
	"""
	Instantiate the suggestion engine.

	Args:
		config: Application configuration.

	Returns:
		SuggestionEngine bound to a Gemini transport.
	"""
	if not config.api_key:
		raise ConfigurationError(MISSING_KEY_MESSAGE)
	transport = GeminiTransport(api_key=config.api_key, model=config.model)
	return SuggestionEngine(
		transport=transport,
		api_key=config.api_key,
		model=config.model,
		temperature=config.temperature,
	)


#============================================


def _print_policy(policy: NamingPolicy, show: bool) -> None:
	if not policy.loaded:
		print(f"{_color('[POLICY]', '33')} {policy.warning}")
	if show:
		print(f"{_color('[POLICY]', '36')} {policy.source}")
		print(policy.text.rstrip())
		print("=" * 60)


def _print_result(session: NamingSession, path: Path) -> bool:
	print(f"{_color('[FILE]', '34')} {path.name}")
	if session.error:
		print(f"{_color('[ERROR]', '31')} {session.error}")
		return False
	if not session.suggestions:
		print(f"{_color('[NAME]', '32')} (no suggestions returned)")
	for idx, name in enumerate(session.suggestions, start=1):
		print(f"{_color('[NAME]', '32')} {idx}. {name}")
	return True


#============================================


def run(config: AppConfig, engine: SuggestionEngine) -> int:
	"""
	Name every configured file, one request per file.

	Returns:
		Process exit status (0 when every file succeeded).
	"""
	policy = load_naming_policy(config.policy_source)
	_print_policy(policy, config.show_policy)
	session = NamingSession(engine, policy, extract_docx=config.extract_docx)
	failures = 0
	for path in config.normalized_paths():
		try:
			session.select_file(UploadedFile.from_path(path))
		except FileReadError as exc:
			session.fail_selection(str(exc))
		if not session.error:
			session.submit()
		if not _print_result(session, path):
			failures += 1
	return 1 if failures else 0


#============================================


def main(argv: list[str] | None = None) -> None:
	"""
	Entry point for the CLI.
	"""
	args = parse_args(argv)
	config = build_config(args)
	if config.verbose:
		logging.basicConfig(level=logging.INFO)
	else:
		logging.basicConfig(level=logging.WARNING)
	try:
		engine = build_engine(config)
	except ConfigurationError as exc:
		print(f"{_color('[ERROR]', '31')} {exc}", file=sys.stderr)
		sys.exit(2)
	sys.exit(run(config, engine))


#============================================


if __name__ == "__main__":
	main()
