"""Tests for identity, clocks, bearer tokens and logging setup."""

import logging

import pydantic
import pytest

from quote_keeper_api.app.core import clock as clock_module
from quote_keeper_api.app.core.clock import ManualClock, SystemClock
from quote_keeper_api.app.core.config import Settings
from quote_keeper_api.app.core.identity import Principal
from quote_keeper_api.app.core.logging_config import resolve_level, setup_logging
from quote_keeper_api.app.core.security import create_access_token, decode_access_token


class TestPrincipal:
    def test_equal_by_value(self):
        assert Principal("alice") == Principal("alice")
        assert Principal("alice") != Principal("bob")

    def test_not_equal_to_raw_string(self):
        assert Principal("alice") != "alice"

    def test_hashable(self):
        assert len({Principal("alice"), Principal("alice"), Principal("bob")}) == 2

    def test_serialises_as_plain_string(self):
        assert Principal("alice").model_dump_json() == '"alice"'
        assert str(Principal("alice")) == "alice"

    def test_empty_principal_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Principal("")


class TestClocks:
    def test_manual_clock_steps_forward(self):
        clock = ManualClock(start=100, step=5)

        assert [clock.now(), clock.now(), clock.now()] == [100, 105, 110]

    def test_manual_clock_advance(self):
        clock = ManualClock(start=0, step=1)
        clock.advance(50)

        assert clock.now() == 50

    def test_system_clock_never_goes_backwards(self, monkeypatch):
        readings = iter([2_000, 1_000, 3_000])
        monkeypatch.setattr(clock_module.time, "time_ns", lambda: next(readings))
        clock = SystemClock()

        assert [clock.now(), clock.now(), clock.now()] == [2_000, 2_000, 3_000]


class TestAccessTokens:
    def test_round_trip(self):
        token = create_access_token({"sub": "alice"}, secret_key="s3cret")

        payload = decode_access_token(token, secret_key="s3cret")

        assert payload["sub"] == "alice"

    def test_wrong_secret_rejected(self):
        token = create_access_token({"sub": "alice"}, secret_key="s3cret")

        assert decode_access_token(token, secret_key="other") is None

    def test_tampered_payload_rejected(self):
        token = create_access_token({"sub": "alice"}, secret_key="s3cret")
        forged = create_access_token({"sub": "mallory"}, secret_key="s3cret")
        header, _, signature = token.split(".")
        _, forged_payload, _ = forged.split(".")

        assert decode_access_token(f"{header}.{forged_payload}.{signature}", secret_key="s3cret") is None

    def test_expired_token_rejected(self):
        token = create_access_token({"sub": "alice"}, expires_delta=-10, secret_key="s3cret")

        assert decode_access_token(token, secret_key="s3cret") is None

    @pytest.mark.parametrize("garbage", ["", "abc", "a.b.c", "!!.??.**"])
    def test_malformed_token_rejected(self, garbage):
        assert decode_access_token(garbage, secret_key="s3cret") is None


@pytest.fixture
def bare_root_logger(monkeypatch):
    """Root logger with no handlers, restored after the test."""
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    level = root.level
    yield root
    for handler in root.handlers:
        handler.close()
    root.setLevel(level)


class TestLoggingSetup:
    @pytest.mark.parametrize(
        "name, expected",
        [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("nonsense", logging.INFO)],
    )
    def test_resolve_level(self, name, expected):
        assert resolve_level(name) == expected

    def test_level_and_file_come_from_settings(self, bare_root_logger, tmp_path):
        log_file = tmp_path / "api.log"

        setup_logging(Settings(log_level="warning", log_file=str(log_file)))

        assert bare_root_logger.level == logging.WARNING
        kinds = [type(handler) for handler in bare_root_logger.handlers]
        assert kinds == [logging.StreamHandler, logging.FileHandler]
        assert bare_root_logger.handlers[1].baseFilename == str(log_file.resolve())

    def test_console_only_without_log_file(self, bare_root_logger):
        setup_logging(Settings(log_level="INFO", log_file=""))

        assert [type(handler) for handler in bare_root_logger.handlers] == [logging.StreamHandler]

    def test_second_call_keeps_existing_handlers(self, bare_root_logger):
        setup_logging(Settings(log_file=""))
        handlers = list(bare_root_logger.handlers)

        setup_logging(Settings(log_level="DEBUG", log_file=""))

        assert bare_root_logger.handlers == handlers
