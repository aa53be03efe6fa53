"""Tests for BaseService and service inheritance."""

from pathlib import Path

import pytest

from utilkit.config.settings import UtilkitSettings
from utilkit.services.api import ApiService
from utilkit.services.base import BaseService
from utilkit.services.dates import DateService


class TestBaseService:
    def test_settings_stored(self, tmp_path: Path) -> None:
        settings = UtilkitSettings.from_cli(start=tmp_path)
        service = BaseService(settings)
        assert service._settings is settings

    def test_ok_envelope(self) -> None:
        result = BaseService._ok("op", {"a": 1}, warnings=["w"], meta={"total": 1})
        assert result.ok is True
        assert result.data == {"a": 1}
        assert result.warnings == ["w"]
        assert result.meta == {"total": 1}

    def test_error_envelope(self) -> None:
        result = BaseService._error("list_exports", "UNKNOWN_MODULE", "message")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "UNKNOWN_MODULE"
        assert result.error.detail == {}


@pytest.mark.parametrize("service_cls", [ApiService, DateService])
def test_services_extend_base(service_cls: type, tmp_path: Path) -> None:
    assert issubclass(service_cls, BaseService)
    service = service_cls(UtilkitSettings.from_cli(start=tmp_path))
    assert isinstance(service._settings, UtilkitSettings)
