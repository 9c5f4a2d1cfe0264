from __future__ import annotations

import pytest

from yank_engine.runtime.settings import EngineSettings


def test_defaults() -> None:
    settings = EngineSettings()

    assert settings.kill_ring_max == 60
    assert settings.kill_ring_enabled is True
    assert settings.edit_retries == 3
    assert settings.interruption_message == "Previous command was not a yank"


def test_from_env_reads_prefixed_variables() -> None:
    settings = EngineSettings.from_env(
        {
            "YANK_ENGINE_KILL_RING_MAX": "10",
            "YANK_ENGINE_KILL_RING": "off",
            "YANK_ENGINE_EDIT_RETRIES": "5",
        }
    )

    assert settings.kill_ring_max == 10
    assert settings.kill_ring_enabled is False
    assert settings.edit_retries == 5


def test_from_env_ignores_malformed_numbers() -> None:
    settings = EngineSettings.from_env({"YANK_ENGINE_KILL_RING_MAX": "lots"})

    assert settings.kill_ring_max == 60


@pytest.mark.parametrize("field", ["kill_ring_max", "edit_retries"])
def test_non_positive_limits_are_rejected(field: str) -> None:
    with pytest.raises(ValueError):
        EngineSettings(**{field: 0})
