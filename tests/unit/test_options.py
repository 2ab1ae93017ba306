"""Unit tests for ExecutionConfig resolution."""

import dataclasses

import pytest

from minigrep.exceptions import ConfigError, MissingArgumentsError
from minigrep.options import ExecutionConfig


@pytest.mark.unit
class TestExecutionConfigBuild:
    """Test building the configuration from argv and an environment mapping."""

    def test_build_basic(self):
        config = ExecutionConfig.build(["minigrep", "needle", "haystack.txt"], environ={})

        assert config.query == "needle"
        assert config.filename == "haystack.txt"
        assert config.case_sensitive is True

    def test_missing_filename(self):
        """Only the query supplied is a missing-arguments error."""
        with pytest.raises(MissingArgumentsError) as exc_info:
            ExecutionConfig.build(["minigrep", "needle"], environ={})

        assert exc_info.value.message == "Some arguments appear to be missing"
        assert exc_info.value.received == 2
        assert isinstance(exc_info.value, ConfigError)

    @pytest.mark.parametrize("args", [[], ["minigrep"]])
    def test_missing_everything(self, args):
        with pytest.raises(MissingArgumentsError):
            ExecutionConfig.build(args, environ={})

    def test_extra_arguments_are_ignored(self):
        config = ExecutionConfig.build(["minigrep", "q", "f.txt", "extra", "--flag"], environ={})
        assert (config.query, config.filename) == ("q", "f.txt")

    def test_empty_query_is_allowed(self):
        config = ExecutionConfig.build(["minigrep", "", "f.txt"], environ={})
        assert config.query == ""

    @pytest.mark.parametrize("value", ["1", "0", "false", ""])
    def test_case_insensitive_presence_only(self, value):
        """Any value of CASE_INSENSITIVE, even empty or 'false', disables case sensitivity."""
        config = ExecutionConfig.build(["minigrep", "q", "f.txt"], environ={"CASE_INSENSITIVE": value})
        assert config.case_sensitive is False

    def test_unrelated_environment_ignored(self):
        config = ExecutionConfig.build(["minigrep", "q", "f.txt"], environ={"CASE_SENSITIVE": "1"})
        assert config.case_sensitive is True

    def test_defaults_to_process_environment(self, monkeypatch):
        monkeypatch.setenv("CASE_INSENSITIVE", "")
        assert ExecutionConfig.build(["minigrep", "q", "f.txt"]).case_sensitive is False

        monkeypatch.delenv("CASE_INSENSITIVE")
        assert ExecutionConfig.build(["minigrep", "q", "f.txt"]).case_sensitive is True

    def test_arguments_are_copied(self):
        args = ["minigrep", "q", "f.txt"]
        config = ExecutionConfig.build(args, environ={})
        args[1] = "changed"
        assert config.query == "q"


@pytest.mark.unit
class TestExecutionConfigImmutability:
    """The configuration cannot change after construction."""

    def test_frozen(self):
        config = ExecutionConfig(query="q", filename="f.txt")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.query = "other"  # type: ignore[misc]

    def test_create_updated_returns_copy(self):
        config = ExecutionConfig(query="q", filename="f.txt")
        updated = config.create_updated(case_sensitive=False)

        assert updated.case_sensitive is False
        assert config.case_sensitive is True
        assert updated.query == "q"

    def test_field_metadata_has_help(self):
        for field in dataclasses.fields(ExecutionConfig):
            assert field.metadata["help"]
