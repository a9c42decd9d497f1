import pytest
from pydantic import ValidationError
from phraselint.config import Settings

def test_defaults(monkeypatch):
    monkeypatch.delenv("PHRASELINT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PHRASELINT_ENV", raising=False)
    s = Settings(_env_file=None)
    assert s.ENV == "development"
    assert s.LOG_LEVEL == "WARNING"
    assert s.ENTRY is None
    assert s.REF == "en.json"

def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PHRASELINT_ENTRY", "./i18n")
    monkeypatch.setenv("PHRASELINT_REF", "sv.json")
    monkeypatch.setenv("PHRASELINT_LOG_LEVEL", "debug")
    s = Settings(_env_file=None)
    assert s.ENTRY == "./i18n"
    assert s.REF == "sv.json"
    assert s.LOG_LEVEL == "DEBUG"

def test_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("PHRASELINT_REF", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("PHRASELINT_REF=fi.json\nUNRELATED=1\n", encoding="utf-8")
    s = Settings(_env_file=env_file)
    assert s.REF == "fi.json"

def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("PHRASELINT_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
