from __future__ import annotations

from pathlib import Path

from superheroes.config import Settings, default_data_file, get_data_file


def test_defaults(monkeypatch) -> None:
    for key in ("DATA_FILE", "HOST", "PORT", "DEBUG", "CORS_ORIGINS", "LOG_LEVEL"):
        monkeypatch.delenv(f"SUPERHEROES_{key}", raising=False)

    settings = Settings()
    assert settings.DATA_FILE == default_data_file()
    assert settings.DATA_FILE.name == "superheroes.json"
    assert settings.PORT == 3000
    assert settings.DEBUG is False
    assert settings.CORS_ORIGINS == ["*"]


def test_environment_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("SUPERHEROES_DATA_FILE", str(tmp_path / "heroes.yaml"))
    monkeypatch.setenv("SUPERHEROES_PORT", "8080")
    monkeypatch.setenv("SUPERHEROES_DEBUG", "yes")
    monkeypatch.setenv("SUPERHEROES_CORS_ORIGINS", "http://localhost:5173, http://example.test")

    settings = Settings()
    assert settings.DATA_FILE == tmp_path / "heroes.yaml"
    assert settings.PORT == 8080
    assert settings.DEBUG is True
    assert settings.CORS_ORIGINS == ["http://localhost:5173", "http://example.test"]
    assert get_data_file() == tmp_path / "heroes.yaml"
