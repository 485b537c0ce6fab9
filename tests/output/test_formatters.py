"""Tests for the format_result dispatcher and OutputSettings."""

import json

from optionkit.output.formatters import OutputSettings, format_result
from optionkit.services.result import ServiceResult


def _ok(**data: object) -> ServiceResult:
    return ServiceResult(ok=True, op="probe", data=dict(data))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResult:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(_ok(value="x"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"]["value"] == "x"

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(_ok(value="x"), settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["op"] == "probe"

    def test_quiet_mode(self) -> None:
        assert format_result(_ok(value="x"), settings=OutputSettings(quiet=True)) == "x"

    def test_human_mode_default(self) -> None:
        output = format_result(_ok(present=True, value="x", source="held"))
        assert output.startswith("OK")
