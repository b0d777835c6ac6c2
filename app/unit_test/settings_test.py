from pathlib import Path

from app.config import DEFAULT_KNOWLEDGE_BASE_PATH, load_settings


def test_defaults(monkeypatch):
    for name in ("LLM_MODEL", "LLM_TEMPERATURE", "KNOWLEDGE_BASE_PATH", "CORS_ALLOW_ORIGINS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.llm_model == "gpt-4o-mini"
    assert settings.llm_temperature == 0.0
    assert settings.knowledge_base_path == DEFAULT_KNOWLEDGE_BASE_PATH
    assert settings.cors_allow_origins == ("*",)
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("LLM_MODEL", "gpt-4o")
    monkeypatch.setenv("LLM_TEMPERATURE", "0.3")
    monkeypatch.setenv("KNOWLEDGE_BASE_PATH", str(tmp_path / "kb.txt"))
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://acme.example, https://www.acme.example")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.llm_model == "gpt-4o"
    assert settings.llm_temperature == 0.3
    assert settings.knowledge_base_path == Path(tmp_path / "kb.txt")
    assert settings.cors_allow_origins == ("https://acme.example", "https://www.acme.example")
    assert settings.log_level == "DEBUG"


def test_bundled_knowledge_base_exists():
    assert DEFAULT_KNOWLEDGE_BASE_PATH.is_file()


def test_logger_level_follows_settings():
    import logging

    from app.config import get_settings
    from app.logger import logger, resolve_level

    assert logger.logger.level == resolve_level(get_settings().log_level)
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("not-a-level") == logging.INFO
