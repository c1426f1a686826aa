"""Tests for TOML loading, merging and environment parsing."""

from pathlib import Path

import pytest
from pyfakefs.fake_filesystem import FakeFilesystem

from groot.config import (
    coerce_env_value,
    deep_merge,
    parse_env_vars,
    read_toml_file,
    set_nested_key,
)
from groot.exceptions import ConfigLoadError


class TestReadTomlFile:
    def test_reads_tables(self, fs: FakeFilesystem) -> None:
        _ = fs.create_file(
            "/cfg/config.toml",
            contents='[logging]\nlevel = "debug"\n\n[repository]\ndir_name = ".vcs"\n',
        )

        data = read_toml_file(Path("/cfg/config.toml"))

        assert data == {"logging": {"level": "debug"}, "repository": {"dir_name": ".vcs"}}

    def test_missing_file_raises(self, fs: FakeFilesystem) -> None:
        with pytest.raises(FileNotFoundError):
            _ = read_toml_file(Path("/cfg/missing.toml"))

    def test_invalid_toml_reports_location(self, fs: FakeFilesystem) -> None:
        _ = fs.create_file("/cfg/config.toml", contents="[logging\nlevel = 1\n")

        with pytest.raises(ConfigLoadError) as exc_info:
            _ = read_toml_file(Path("/cfg/config.toml"))

        assert exc_info.value.path == Path("/cfg/config.toml")
        assert "line 1" in str(exc_info.value)


class TestDeepMerge:
    def test_nested_dicts_merge(self) -> None:
        base = {"logging": {"level": "info", "format": "json"}}
        override = {"logging": {"level": "debug"}}

        assert deep_merge(base, override) == {
            "logging": {"level": "debug", "format": "json"}
        }

    def test_lists_are_replaced(self) -> None:
        assert deep_merge({"a": [1, 2]}, {"a": [3]}) == {"a": [3]}

    def test_inputs_are_not_modified(self) -> None:
        base = {"logging": {"level": "info"}}
        override = {"logging": {"file": "x.log"}}

        merged = deep_merge(base, override)
        merged["logging"]["level"] = "error"

        assert base == {"logging": {"level": "info"}}
        assert override == {"logging": {"file": "x.log"}}


class TestEnvVars:
    def test_nested_keys(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GROOT_LOGGING__LEVEL", "debug")
        monkeypatch.setenv("GROOT_REPOSITORY__DIR_NAME", ".vcs")

        values = parse_env_vars()

        assert values["logging"]["level"] == "debug"
        assert values["repository"] == {"dir_name": ".vcs"}

    def test_flags_without_double_underscore_are_ignored(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("GROOT_LOGGING__FILE", raising=False)
        monkeypatch.setenv("GROOT_DEBUG", "1")
        monkeypatch.setenv("GROOT_STRICT_CONFIG", "1")

        assert parse_env_vars() == {}

    def test_other_prefixes_are_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("GROOT_LOGGING__FILE", raising=False)
        monkeypatch.setenv("OTHER_LOGGING__LEVEL", "debug")

        assert parse_env_vars() == {}

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("true", True),
            ("FALSE", False),
            ("42", 42),
            ("1.5", 1.5),
            ('["a", "b"]', ["a", "b"]),
            ('{"k": 1}', {"k": 1}),
            ("[not json", "[not json"),
            ("debug", "debug"),
        ],
    )
    def test_value_inference(self, raw: str, expected: object) -> None:
        assert coerce_env_value(raw) == expected


def test_set_nested_key_creates_tables() -> None:
    d: dict[str, object] = {"logging": "not a table"}

    set_nested_key(d, "logging.level", "debug")

    assert d == {"logging": {"level": "debug"}}


def test_parse_env_vars_reads_given_mapping() -> None:
    environ = {"GROOT_LOGGING__FORMAT": "text", "HOME": "/root"}

    assert parse_env_vars(environ) == {"logging": {"format": "text"}}


@pytest.mark.parametrize("raw", ["inf", "1e5", ".vcs"])
def test_only_dotted_numbers_become_floats(raw: str) -> None:
    assert coerce_env_value(raw) == raw
