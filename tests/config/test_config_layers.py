# topmark:header:start
#
#   project      : tfremover
#   file         : test_config_layers.py
#   file_relpath : tests/config/test_config_layers.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Configuration: bundled defaults, discovery, merging and CLI overrides."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import toml

from tfremover.config import Config, MutableConfig
from tfremover.config.io import load_toml_dict, nest_toml_under_section, to_toml


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_bundled_defaults() -> None:
    config: Config = Config.default()
    assert config.block_type == "removed"
    assert config.normalize_whitespace is False
    assert config.dry_run is False
    assert config.suffixes == (".tf",)
    assert config.include_patterns == ()
    assert config.exclude_patterns == (".terraform/",)
    assert config.config_files == ("<defaults>",)


def test_unknown_keys_are_ignored_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        draft: MutableConfig = MutableConfig.from_toml_dict(
            {"remove": {"normalize_whitespace": True}, "header": {}}
        )
    assert draft.normalize_whitespace is True
    assert "Ignoring unknown configuration key 'header'" in caplog.text


def test_discovery_order_and_root_stop(tmp_path: Path) -> None:
    _write(tmp_path / "tfremover.toml", "[remove]\nblock_type = 'import'\n")
    root: Path = tmp_path / "repo"
    _write(root / "tfremover.toml", "root = true\n[remove]\nnormalize_whitespace = true\n")
    _write(root / "infra" / "pyproject.toml", "[tool.tfremover.remove]\nblock_type = 'moved'\n")
    _write(root / "infra" / "prod" / "tfremover.toml", "[remove]\ndry_run = true\n")
    _write(root / "infra" / "prod" / "pyproject.toml", "[project]\nname = 'x'\n")

    found: list[Path] = MutableConfig.discover_local_config_files(root / "infra" / "prod")
    assert found == [
        (root / "tfremover.toml").resolve(),
        (root / "infra" / "pyproject.toml").resolve(),
        (root / "infra" / "prod" / "tfremover.toml").resolve(),
    ]

    config: Config = MutableConfig.load_merged(anchor=root / "infra" / "prod").freeze()
    assert config.block_type == "moved"
    assert config.normalize_whitespace is True
    assert config.dry_run is True


def test_nearest_file_wins(tmp_path: Path) -> None:
    _write(tmp_path / "tfremover.toml", "root = true\n[remove]\nblock_type = 'moved'\n")
    _write(tmp_path / "sub" / "tfremover.toml", "[remove]\nblock_type = 'import'\n")
    config: Config = MutableConfig.load_merged(anchor=tmp_path / "sub").freeze()
    assert config.block_type == "import"


def test_discovery_starts_at_working_directory(isolation: Path) -> None:
    _write(isolation / "tfremover.toml", "root = true\n[remove]\nnormalize_whitespace = true\n")
    config: Config = MutableConfig.load_merged().freeze()
    assert config.normalize_whitespace is True
    assert config.config_files == ("<defaults>", (isolation / "tfremover.toml").resolve())


def test_no_config_uses_defaults_and_explicit_files(tmp_path: Path) -> None:
    _write(tmp_path / "tfremover.toml", "root = true\n[remove]\nblock_type = 'moved'\n")
    extra: Path = _write(tmp_path / "extra.toml", "[files]\nsuffixes = ['.tf', '.tofu']\n")

    config: Config = MutableConfig.load_merged(
        anchor=tmp_path, extra_config_files=[extra], no_config=True
    ).freeze()
    assert config.block_type == "removed"
    assert config.suffixes == (".tf", ".tofu")
    assert config.config_files == ("<defaults>", extra)


def test_pattern_lists_replace_lower_layers() -> None:
    base: MutableConfig = MutableConfig.from_defaults()
    layer: MutableConfig = MutableConfig.from_toml_dict(
        {"files": {"exclude_patterns": ["vendor/"]}}
    )
    assert base.merge_with(layer).freeze().exclude_patterns == ("vendor/",)
    assert base.merge_with(MutableConfig()).freeze().exclude_patterns == (".terraform/",)


def test_cli_overrides() -> None:
    draft: MutableConfig = MutableConfig.from_defaults().apply_cli_args(
        {
            "dry_run": True,
            "normalize_whitespace": None,
            "block_type": "moved",
            "include_patterns": ("modules/",),
            "exclude_patterns": ("tmp/",),
        }
    )
    config: Config = draft.freeze()
    assert config.dry_run is True
    assert config.normalize_whitespace is False
    assert config.block_type == "moved"
    assert config.include_patterns == ("modules/",)
    assert config.exclude_patterns == (".terraform/", "tmp/")
    assert config.config_files[-1] == "<cli>"


@pytest.mark.parametrize("block_type", ["", "not valid", "1abc", "re-moved!"])
def test_invalid_block_type_is_rejected(block_type: str) -> None:
    with pytest.raises(ValueError):
        MutableConfig(block_type=block_type).freeze()


def test_empty_suffix_is_rejected() -> None:
    with pytest.raises(ValueError):
        MutableConfig(suffixes=[""]).freeze()


def test_thaw_and_export_round_trip() -> None:
    config: Config = Config.default().thaw().apply_cli_args({"block_type": "moved"}).freeze()
    again: Config = MutableConfig.from_toml_dict(config.to_toml_dict()).freeze()
    assert again.to_toml_dict() == config.to_toml_dict()


def test_malformed_toml_is_logged_and_ignored(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    bad: Path = _write(tmp_path / "tfremover.toml", "[remove\n")
    with caplog.at_level(logging.ERROR):
        assert load_toml_dict(bad) == {}
    assert "Error decoding TOML" in caplog.text


def test_nest_under_pyproject_section() -> None:
    nested: str = nest_toml_under_section(to_toml(Config.default().to_toml_dict()), "tool.tfremover")
    parsed = toml.loads(nested)
    assert parsed["tool"]["tfremover"]["remove"]["block_type"] == "removed"
    assert parsed["tool"]["tfremover"]["files"]["suffixes"] == [".tf"]
    with pytest.raises(ValueError):
        nest_toml_under_section("a = 1\n", "..")
