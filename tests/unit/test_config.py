import pytest
import typer

from sdk.config import AppConfig, load_config


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.setenv("SPLITWATCH_DATA_ROOT", str(tmp_path))
    monkeypatch.delenv("SPLITWATCH_TICK_MS", raising=False)
    monkeypatch.delenv("SPLITWATCH_JOURNAL", raising=False)
    cfg = load_config()
    assert cfg.tick_interval_ms == 30
    assert cfg.tick_interval == pytest.approx(0.03)
    assert cfg.max_splits == 100
    assert cfg.journal is True
    assert cfg.paths.data_root == tmp_path


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("SPLITWATCH_DATA_ROOT", str(tmp_path))
    monkeypatch.setenv("SPLITWATCH_TICK_MS", "50")
    monkeypatch.setenv("SPLITWATCH_JOURNAL", "0")
    cfg = load_config()
    assert cfg.tick_interval_ms == 50
    assert cfg.journal is False


def test_explicit_values_are_validated():
    with pytest.raises(ValueError):
        AppConfig(tick_interval_ms=1)
    with pytest.raises(ValueError):
        AppConfig(max_splits=0)


@pytest.mark.parametrize("raw", ["fast", "1"])
def test_bad_tick_env_is_reported_as_bad_parameter(monkeypatch, tmp_path, raw):
    monkeypatch.setenv("SPLITWATCH_DATA_ROOT", str(tmp_path))
    monkeypatch.setenv("SPLITWATCH_TICK_MS", raw)
    with pytest.raises(typer.BadParameter) as excinfo:
        load_config()
    assert "SPLITWATCH_TICK_MS" in excinfo.value.format_message()


def test_package_exposes_no_import_time_config():
    import sdk

    assert not hasattr(sdk, "SDK_CONFIG")
    assert sdk.load_config is load_config
