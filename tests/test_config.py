from __future__ import annotations

import pytest

from vie.config import DEFAULT_MAX_COUNT, DEFAULT_TICK_RATE, EditorConfig


def test_defaults() -> None:
    config = EditorConfig()

    assert config.tick_rate == DEFAULT_TICK_RATE == 0.25
    assert config.max_count == DEFAULT_MAX_COUNT == 99999
    assert config.log_file is None


def test_from_env_reads_prefixed_values() -> None:
    config = EditorConfig.from_env(
        {"VIE_TICK_RATE": "0.1", "VIE_MAX_COUNT": "500", "VIE_LOG_FILE": " vie.log "}
    )

    assert config == EditorConfig(tick_rate=0.1, max_count=500, log_file="vie.log")


@pytest.mark.parametrize("value", ["", "abc", "0", "-3"])
def test_from_env_falls_back_on_bad_values(value: str) -> None:
    config = EditorConfig.from_env({"VIE_TICK_RATE": value, "VIE_MAX_COUNT": value})

    assert config.tick_rate == DEFAULT_TICK_RATE
    assert config.max_count == DEFAULT_MAX_COUNT


def test_with_overrides_skips_none() -> None:
    config = EditorConfig(tick_rate=0.5)

    updated = config.with_overrides(tick_rate=None, log_file="out.log")

    assert updated.tick_rate == 0.5
    assert updated.log_file == "out.log"


def test_rejects_non_positive_values() -> None:
    with pytest.raises(ValueError):
        EditorConfig(tick_rate=0)
    with pytest.raises(ValueError):
        EditorConfig(max_count=-1)
