import logging

from template_helpers.config import Config


def test_defaults(monkeypatch) -> None:
    for name in ("LOG_LEVEL", "DEBUG", "DESC_TRUNCATE_MAX"):
        monkeypatch.delenv(name, raising=False)

    config = Config()
    assert config.log_level == "INFO"
    assert config.debug is False
    assert config.desc_truncate_max == 80
    assert config.effective_log_level == logging.INFO
    assert config.validate() == []


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("DESC_TRUNCATE_MAX", "40")

    config = Config()
    assert config.log_level == "WARNING"
    assert config.desc_truncate_max == 40
    assert config.effective_log_level == logging.WARNING
    assert config.validate() == []


def test_debug_forces_debug_level(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    monkeypatch.setenv("DEBUG", "TRUE")

    config = Config()
    assert config.debug is True
    assert config.effective_log_level == logging.DEBUG


def test_invalid_values_are_reported(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    monkeypatch.setenv("DESC_TRUNCATE_MAX", "eighty")

    config = Config()
    errors = config.validate()
    assert len(errors) == 2
    assert any("LOG_LEVEL" in e for e in errors)
    assert any("DESC_TRUNCATE_MAX" in e for e in errors)
    # Falls back to the default rather than failing
    assert config.desc_truncate_max == 80


def test_non_positive_truncate_max_is_reported(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("DESC_TRUNCATE_MAX", "0")

    errors = Config().validate()
    assert errors == ["DESC_TRUNCATE_MAX must be positive, got 0"]
