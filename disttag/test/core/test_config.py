"""Tests for disttag.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from disttag.core.config import (
    DEFAULT_REGISTRY_CLI,
    SUMMARY_FILENAME,
    TaggerConfig,
    default_summary_path,
    load_config,
)
from disttag.core.result import Err, Ok


class TestTaggerConfig:
    def test_defaults(self, tmp_path: Path) -> None:
        config = TaggerConfig(summary_path=tmp_path / SUMMARY_FILENAME)
        assert config.registry_cli == DEFAULT_REGISTRY_CLI == "npm"

    def test_frozen(self, tmp_path: Path) -> None:
        config = TaggerConfig(summary_path=tmp_path)
        with pytest.raises(AttributeError):
            config.registry_cli = "pnpm"  # type: ignore[misc]

    def test_with_overrides_applies_values(self, tmp_path: Path) -> None:
        config = TaggerConfig(summary_path=tmp_path / "a.json")
        out = config.with_overrides(summary_path=tmp_path / "b.json", registry_cli="pnpm")
        assert out.summary_path == tmp_path / "b.json"
        assert out.registry_cli == "pnpm"

    def test_with_overrides_ignores_none(self, tmp_path: Path) -> None:
        config = TaggerConfig(summary_path=tmp_path / "a.json", registry_cli="yarn")
        assert config.with_overrides() == config
        assert config.with_overrides(registry_cli="") == config


class TestDefaultSummaryPath:
    def test_one_directory_above_script(self, tmp_path: Path) -> None:
        script = tmp_path / "scripts" / "tag_release.py"
        script.parent.mkdir()
        script.write_text("", encoding="utf-8")

        assert default_summary_path(script) == tmp_path.resolve() / "lerna-publish-summary.json"


class TestLoadConfig:
    def _base(self, tmp_path: Path) -> TaggerConfig:
        return TaggerConfig(summary_path=tmp_path / SUMMARY_FILENAME)

    def test_reads_table(self, tmp_path: Path) -> None:
        path = tmp_path / "disttag.toml"
        path.write_text(
            '[dist-tag]\nsummary = "out/summary.json"\nregistry_cli = "pnpm"\n',
            encoding="utf-8",
        )

        result = load_config(path, base=self._base(tmp_path))

        assert isinstance(result, Ok)
        assert result.value.summary_path == tmp_path.resolve() / "out" / "summary.json"
        assert result.value.registry_cli == "pnpm"

    def test_absolute_summary_kept(self, tmp_path: Path) -> None:
        target = tmp_path / "elsewhere" / "summary.json"
        path = tmp_path / "disttag.toml"
        path.write_text(f"[dist-tag]\nsummary = {str(target)!r}\n", encoding="utf-8")

        result = load_config(path, base=self._base(tmp_path))

        assert isinstance(result, Ok)
        assert result.value.summary_path == target

    def test_missing_table_keeps_base(self, tmp_path: Path) -> None:
        path = tmp_path / "disttag.toml"
        path.write_text("[other]\nx = 1\n", encoding="utf-8")
        base = self._base(tmp_path)

        assert load_config(path, base=base) == Ok(base)

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "nope.toml", base=self._base(tmp_path))

        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "disttag.toml"
        path.write_text("[dist-tag\n", encoding="utf-8")

        result = load_config(path, base=self._base(tmp_path))

        assert isinstance(result, Err)
        assert "invalid TOML" in result.error.message
        assert result.error.path == path

    def test_table_wrong_type(self, tmp_path: Path) -> None:
        path = tmp_path / "disttag.toml"
        path.write_text('"dist-tag" = "npm"\n', encoding="utf-8")

        result = load_config(path, base=self._base(tmp_path))

        assert isinstance(result, Err)
        assert "must be a table" in result.error.message
