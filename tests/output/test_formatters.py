"""Tests for the format_result dispatcher and OutputSettings."""

import json

from vendorctl.output.formatters import OutputSettings, format_result
from vendorctl.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="ERR", message=msg),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(_ok("add", modules=2), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "add"
        assert data["data"]["modules"] == 2

    def test_json_mode_error(self) -> None:
        output = format_result(_err("add", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert format_result(_ok("add"), settings=settings).startswith("{")


class TestFormatResultQuiet:
    def test_quiet_success(self) -> None:
        output = format_result(_ok("link"), settings=OutputSettings(quiet=True))
        assert output == "OK: link"

    def test_quiet_error(self) -> None:
        output = format_result(_err("link", "Bad input"), settings=OutputSettings(quiet=True))
        assert "ERROR" in output
        assert "Bad input" in output


class TestFormatResultRich:
    def test_default_is_rich(self) -> None:
        output = format_result(_ok("init", manifest="/ws/vendorctl.json"))
        assert "OK" in output
        assert "/ws/vendorctl.json" in output
