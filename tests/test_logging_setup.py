"""Tests for logging setup."""

import logging

import pytest
from blogstage.logging_setup import configure_logging, parse_level


class TestParseLevel:
    """Tests for parse_level()."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("info", logging.INFO),
            ("DEBUG", logging.DEBUG),
            (" warning ", logging.WARNING),
            ("error", logging.ERROR),
        ],
    )
    def test__known_name__returns_level(self, name: str, expected: int) -> None:
        assert parse_level(name) == expected

    def test__unknown_name__raises_value_error(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level: loud"):
            parse_level("loud")


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test__configures_root_logger(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[dict] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        configure_logging("debug")

        assert len(calls) == 1
        assert calls[0]["level"] == logging.DEBUG
        assert calls[0]["force"] is True

    def test__unknown_level__raises_before_configuring(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        calls: list[dict] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        with pytest.raises(ValueError):
            configure_logging("loud")

        assert calls == []
