"""Tests for the format_result dispatcher and OutputSettings."""

import json

import pytest

from utilkit.output.formatters import OutputSettings, format_result
from utilkit.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="INVALID_OPTION", message=msg),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False

    def test_frozen(self) -> None:
        s = OutputSettings(json_output=True)
        with pytest.raises(AttributeError):
            s.json_output = False  # type: ignore[misc]


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        result = _ok("format_date", formatted="10/1/23")
        output = format_result(result, settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "format_date"
        assert data["data"]["formatted"] == "10/1/23"

    def test_json_mode_error(self) -> None:
        output = format_result(_err("format_date", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        output = format_result(_ok("test", key="val"), settings=settings)
        assert json.loads(output)["data"]["key"] == "val"


class TestFormatResultQuiet:
    def test_quiet_success(self) -> None:
        output = format_result(_ok("test", key="val"), settings=OutputSettings(quiet=True))
        assert output == "OK: test"

    def test_quiet_error(self) -> None:
        output = format_result(_err("format_date", "Bad input"), settings=OutputSettings(quiet=True))
        assert "ERROR" in output
        assert "Bad input" in output


class TestFormatResultRich:
    def test_default_is_rich(self) -> None:
        output = format_result(_ok("test", key="val"))
        assert output.startswith("OK")
        assert "key: val" in output
