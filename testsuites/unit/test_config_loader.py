import pytest
import yaml

from testsuites.ui_testing.framework.config_loader import ConfigLoader, ConfigurationError, UISettings


@pytest.fixture(autouse=True)
def _fresh_loader(monkeypatch):
    for key in ("UI_BASE_URL", "UI_BROWSER", "UI_HEADLESS", "UI_IMPLICIT_WAIT", "UI_PAGE_LOAD_TIMEOUT", "ENV", "ENVIRONMENT"):
        monkeypatch.delenv(key, raising=False)
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()


def test_env_override_and_defaults(monkeypatch, tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        yaml.dump({"ui": {"base_url": "http://example.com", "implicit_wait": 10}}),
        encoding="utf-8",
    )

    loader = ConfigLoader(config_path=config_path)
    assert loader.get("ui.base_url") == "http://example.com"
    assert loader.get("ui.page_load_timeout", 30) == 30

    ConfigLoader.reset()
    monkeypatch.setenv("UI_BASE_URL", "http://env.example.com")
    monkeypatch.setenv("UI_IMPLICIT_WAIT", "5")
    loader = ConfigLoader(config_path=config_path)
    assert loader.get("ui.base_url") == "http://env.example.com"
    assert loader.get("ui.implicit_wait", 10) == 5


def test_reload_updates_values(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({"ui": {"page_load_timeout": 5}}), encoding="utf-8")

    loader = ConfigLoader(config_path=config_path)
    assert loader.get("ui.page_load_timeout") == 5

    config_path.write_text(yaml.dump({"ui": {"page_load_timeout": 15}}), encoding="utf-8")
    loader.reload()
    assert loader.get("ui.page_load_timeout") == 15


def test_environment_overlay_is_merged(monkeypatch, tmp_path):
    (tmp_path / "config.yaml").write_text(
        yaml.dump({"ui": {"base_url": "http://dev.example.com", "browser": "chrome"}}),
        encoding="utf-8",
    )
    (tmp_path / "staging.yaml").write_text(
        yaml.dump({"ui": {"base_url": "http://staging.example.com"}}),
        encoding="utf-8",
    )
    monkeypatch.setenv("ENV", "staging")

    loader = ConfigLoader(config_path=tmp_path / "config.yaml")

    assert loader.get("ui.base_url") == "http://staging.example.com"
    assert loader.get("ui.browser") == "chrome"


def test_invalid_yaml_raises(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("ui: [unclosed", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        ConfigLoader(config_path=config_path)


def test_ui_settings_defaults_when_file_missing(tmp_path):
    settings = UISettings.from_config(ConfigLoader(config_path=tmp_path / "missing.yaml"))

    assert settings == UISettings()
    assert settings.implicit_wait == 10.0
    assert settings.page_load_timeout == 30.0


def test_ui_settings_from_yaml_and_env(monkeypatch, tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        yaml.dump({"ui": {"base_url": "https://dev-dash.example.com/", "browser": "Firefox"}}),
        encoding="utf-8",
    )
    monkeypatch.setenv("UI_HEADLESS", "false")

    settings = UISettings.from_config(ConfigLoader(config_path=config_path))

    assert settings.base_url == "https://dev-dash.example.com"
    assert settings.browser == "firefox"
    assert settings.headless is False


def test_ui_settings_reject_non_positive_timeouts(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({"ui": {"implicit_wait": 0}}), encoding="utf-8")

    with pytest.raises(ConfigurationError):
        UISettings.from_config(ConfigLoader(config_path=config_path))


def test_ui_settings_reject_non_numeric_timeout_override(monkeypatch, tmp_path):
    monkeypatch.setenv("UI_IMPLICIT_WAIT", "ten")

    with pytest.raises(ConfigurationError, match="ten"):
        UISettings.from_config(ConfigLoader(config_path=tmp_path / "missing.yaml"))
