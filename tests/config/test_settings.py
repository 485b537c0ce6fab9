"""Tests for OptionkitSettings — CLI flags merged over env vars."""

import pytest

from optionkit.config.settings import OptionkitSettings


class TestDefaults:
    def test_all_defaults(self) -> None:
        settings = OptionkitSettings.from_cli()
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.default_fallback is None

    def test_frozen(self) -> None:
        settings = OptionkitSettings.from_cli()
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestSources:
    def test_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPTIONKIT_DEFAULT_FALLBACK", "n/a")
        monkeypatch.setenv("OPTIONKIT_VERBOSE", "true")
        settings = OptionkitSettings.from_cli()
        assert settings.default_fallback == "n/a"
        assert settings.verbose is True

    def test_cli_flag_overrides_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPTIONKIT_JSON_OUTPUT", "false")
        settings = OptionkitSettings.from_cli(json_output=True)
        assert settings.json_output is True

    def test_unset_flags_keep_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPTIONKIT_QUIET", "1")
        settings = OptionkitSettings.from_cli(quiet=False, default_fallback=None)
        assert settings.quiet is True
