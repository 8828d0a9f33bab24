"""Tests for unfence.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from unfence.config import ConfigError, UnfenceConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, UnfenceConfig)
    assert config.root == tmp_path.resolve()
    assert config.fence is None
    assert config.input is None
    assert config.out_dir is None
    assert config.keep_going is None
    assert config.dry_run is None


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    (tmp_path / ".unfence.yml").write_text(
        """
fence: "···"
input: notes/answer.md
out_dir: generated
encoding: utf-8
keep_going: true
dry_run: "no"
""",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.fence == "···"
    assert config.input == "notes/answer.md"
    assert config.out_dir == "generated"
    assert config.resolve(config.out_dir) == tmp_path.resolve() / "generated"
    assert config.encoding == "utf-8"
    assert config.keep_going is True
    assert config.dry_run is False


def test_load_config_accepts_explicit_file(tmp_path: Path) -> None:
    config_file = tmp_path / "custom.yml"
    config_file.write_text("out_dir: build\n", encoding="utf-8")

    config = load_config(config_file)

    assert config.out_dir == "build"
    assert config.resolve(config.out_dir) == tmp_path.resolve() / "build"
    assert config.root == tmp_path.resolve()


def test_load_config_empty_file_means_defaults(tmp_path: Path) -> None:
    (tmp_path / ".unfence.yml").write_text("\n", encoding="utf-8")
    assert load_config(tmp_path).fence is None


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    (tmp_path / ".unfence.yml").write_text("- one\n- two\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    (tmp_path / ".unfence.yml").write_text("fence: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config(tmp_path)


def test_load_config_ignores_mistyped_values(tmp_path: Path) -> None:
    (tmp_path / ".unfence.yml").write_text("fence: [a, b]\nkeep_going: maybe\n", encoding="utf-8")
    config = load_config(tmp_path)
    assert config.fence is None
    assert config.keep_going is None


def test_resolve_leaves_absolute_paths_and_unset_values(tmp_path: Path) -> None:
    (tmp_path / ".unfence.yml").write_text(
        f"out_dir: {tmp_path / 'abs'}\nlog_file: logs/run.log\n", encoding="utf-8"
    )
    config = load_config(tmp_path)

    assert config.resolve(config.out_dir) == tmp_path / "abs"
    assert config.resolve(config.log_file) == tmp_path.resolve() / "logs" / "run.log"
    assert config.resolve(config.input) is None
