#!/usr/bin/env python3
"""
Tests for CLI config and the per-file run loop.
"""

from pathlib import Path

import pytest

from conftest import DummyTransport
import doc_namer.cli as cli
from doc_namer.cli import build_config, build_engine, parse_args, run
from doc_namer.config import DEFAULT_MODEL, default_policy_source, load_api_key
from doc_namer.errors import ConfigurationError
from doc_namer.llm_engine import SuggestionEngine
from doc_namer.transports.gemini import GeminiTransport


def test_load_api_key_prefers_gemini_variable():
	assert load_api_key({"GEMINI_API_KEY": "g", "API_KEY": "a"}) == "g"
	assert load_api_key({"API_KEY": " a "}) == "a"
	assert load_api_key({"GEMINI_API_KEY": "  "}) is None
	assert load_api_key({}) is None


def test_build_config_reads_args_and_env(monkeypatch, tmp_path: Path):
	monkeypatch.chdir(tmp_path)
	(tmp_path / "naming_ref.md").write_text("local", encoding="utf-8")
	monkeypatch.setenv("GEMINI_API_KEY", "secret")
	args = parse_args(["-p", "a.txt", "b.pdf", "-o", "gemini-x", "--docx-text", "-s"])
	config = build_config(args)
	assert [p.name for p in config.paths] == ["a.txt", "b.pdf"]
	assert config.api_key == "secret"
	assert config.model == "gemini-x"
	assert config.extract_docx is True
	assert config.show_policy is True
	assert config.policy_source == str(tmp_path / "naming_ref.md")


def test_build_engine_without_key_raises(monkeypatch):
	monkeypatch.delenv("GEMINI_API_KEY", raising=False)
	monkeypatch.delenv("API_KEY", raising=False)
	config = build_config(parse_args(["-p", "a.txt"]))
	with pytest.raises(ConfigurationError):
		build_engine(config)


def test_build_engine_uses_gemini(monkeypatch):
	monkeypatch.setenv("API_KEY", "k")
	monkeypatch.delenv("GEMINI_API_KEY", raising=False)
	engine = build_engine(build_config(parse_args(["-p", "a.txt"])))
	assert isinstance(engine.transport, GeminiTransport)
	assert engine.model == DEFAULT_MODEL
	assert engine.temperature == 0.6


def test_main_exits_2_without_key(monkeypatch, capsys):
	monkeypatch.delenv("GEMINI_API_KEY", raising=False)
	monkeypatch.delenv("API_KEY", raising=False)
	with pytest.raises(SystemExit) as info:
		cli.main(["-p", "a.txt"])
	assert info.value.code == 2
	assert "not configured" in capsys.readouterr().err


def test_run_prints_names_and_errors(tmp_path: Path, capsys):
	good = tmp_path / "notes.txt"
	good.write_text("meeting notes", encoding="utf-8")
	bad = tmp_path / "bundle.zip"
	bad.write_bytes(b"PK")
	missing = tmp_path / "gone.txt"
	policy = tmp_path / "naming_ref.md"
	policy.write_text("use [YW]", encoding="utf-8")
	transport = DummyTransport(responses=['["YW_會議紀錄_20240101", "YW_notes_20240101"]'])
	engine = SuggestionEngine(transport=transport, api_key="k")
	config = build_config(parse_args(["-p", str(good), str(bad), str(missing), "-n", str(policy)]))
	status = run(config, engine)
	out = capsys.readouterr().out
	assert status == 1
	assert "1. YW_會議紀錄_20240101" in out
	assert "2. YW_notes_20240101" in out
	assert "Unsupported file type" in out
	assert "Error reading file: gone.txt" in out
	assert len(transport.calls) == 1


def test_run_all_ok_returns_zero_and_warns_on_policy(tmp_path: Path, capsys):
	good = tmp_path / "a.md"
	good.write_text("# title", encoding="utf-8")
	transport = DummyTransport(responses=['["X_a_20240101"]'])
	engine = SuggestionEngine(transport=transport, api_key="k")
	config = build_config(parse_args(["-p", str(good), "-n", str(tmp_path / "nope.md")]))
	assert run(config, engine) == 0
	out = capsys.readouterr().out
	assert "Error loading naming guidelines" in out
	assert "X_a_20240101" in out


def test_default_policy_falls_back_to_repo_copy(tmp_path: Path):
	repo_policy = Path(__file__).resolve().parent.parent / "naming_ref.md"
	assert Path(default_policy_source(tmp_path)) == repo_policy
	local = tmp_path / "naming_ref.md"
	local.write_text("local policy", encoding="utf-8")
	assert default_policy_source(tmp_path) == str(local)


def test_build_config_default_policy_outside_repo(monkeypatch, tmp_path: Path):
	monkeypatch.chdir(tmp_path)
	config = build_config(parse_args(["-p", "a.txt"]))
	assert Path(config.policy_source).read_text(encoding="utf-8").startswith("# 文件命名指南")
