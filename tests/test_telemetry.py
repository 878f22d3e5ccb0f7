from __future__ import annotations

from types import SimpleNamespace

import pytest

from vie.runtime import telemetry


class FakeConfig:
    def __init__(self) -> None:
        self.calls: list[tuple[str, object]] = []

    def __getattr__(self, name: str):
        if not name.startswith("with_"):
            raise AttributeError(name)
        return lambda value: self.calls.append((name, value))

    def values(self, name: str) -> list[object]:
        return [value for call, value in self.calls if call == name]


@pytest.fixture
def fake_telelog(monkeypatch: pytest.MonkeyPatch) -> list[FakeConfig]:
    built: list[FakeConfig] = []

    def make_config() -> FakeConfig:
        built.append(FakeConfig())
        return built[-1]

    monkeypatch.setattr(telemetry, "tl", SimpleNamespace(Config=make_config))
    monkeypatch.setattr(telemetry, "_ACTIVE_CONFIG", None)
    monkeypatch.setattr(telemetry, "_LOGGER_CACHE", {})
    for name in ("LOG_LEVEL", "LOG_FILE", "LOG_JSON", "DISABLE_CONSOLE", "NO_COLOR"):
        monkeypatch.delenv(f"VIE_{name}", raising=False)
    return built


def test_log_file_argument_is_applied_once(
    fake_telelog: list[FakeConfig], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("VIE_LOG_FILE", "from-env.log")

    telemetry.configure(console=False, log_file="from-cli.log")

    (config,) = fake_telelog
    assert config.values("with_file_output") == ["from-cli.log"]
    assert config.values("with_console_output") == [False]
    assert config.values("with_colored_output") == []


def test_log_file_falls_back_to_environment(
    fake_telelog: list[FakeConfig], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("VIE_LOG_FILE", "from-env.log")
    monkeypatch.setenv("VIE_LOG_LEVEL", "debug")

    telemetry.configure(console=False)

    (config,) = fake_telelog
    assert config.values("with_file_output") == ["from-env.log"]
    assert config.values("with_min_level") == ["DEBUG"]


def test_no_file_sink_without_a_path(fake_telelog: list[FakeConfig]) -> None:
    telemetry.configure()

    (config,) = fake_telelog
    assert config.values("with_file_output") == []
    assert config.values("with_console_output") == [True]
    assert config.values("with_profiling") == [True]


def test_explicit_config_excludes_sink_overrides(fake_telelog: list[FakeConfig]) -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=FakeConfig(), log_file="x.log")

    assert fake_telelog == []
