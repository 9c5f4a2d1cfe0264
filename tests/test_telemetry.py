from __future__ import annotations

import pytest

from yank_engine.runtime import telemetry


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_get_logger_is_cached() -> None:
    assert telemetry.get_logger("yank_engine.test") is telemetry.get_logger(
        "yank_engine.test"
    )


def test_span_propagates_errors() -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("test::span", metadata={"case": "error"}) as handle:
            handle.add_metadata("step", 1)
            raise RuntimeError("boom")
