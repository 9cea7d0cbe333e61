#!/usr/bin/env python3
"""
Repo-root runner for doc_namer.

Examples:
	python run_doc_namer.py --paths report.pdf
	python run_doc_namer.py --paths notes.md slides.png --naming-ref naming_ref.md
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
	"""
	Run the CLI entrypoint with repo-root import behavior.
	"""
	repo_root = Path(__file__).resolve().parent
	if str(repo_root) not in sys.path:
		sys.path.insert(0, str(repo_root))

	from doc_namer.cli import main as cli_main

	cli_main()


if __name__ == "__main__":
	main()
