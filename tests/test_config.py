"""
test_config.py - Tests for crudlab/config.py

Called by: pytest
Depends on: crudlab/config.py
"""

import pytest

from crudlab.config import Settings


def test_defaults(monkeypatch):
    for var in ("PORT", "MUSICOS_DATABASE_URL", "ALUMNOS_DATABASE_URL", "PROYECTOS_DATABASE_URL",
                "MUSICOS_RESET_ON_START", "PROYECTOS_RESET_ON_START"):
        monkeypatch.delenv(var, raising=False)
    s = Settings(_env_file=None)
    assert s.port == 3000
    assert s.database_url("musicos") == "sqlite:///db_musicos.db"
    assert s.database_url("alumnos") == "sqlite:///db_alumnos.db"
    assert s.database_url("proyectos") == "sqlite:///parcial.db"
    assert s.reset_on_start("proyectos") is True
    assert s.reset_on_start("musicos") is False


def test_env_override(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("ALUMNOS_DATABASE_URL", "sqlite:///otra.db")
    s = Settings(_env_file=None)
    assert s.port == 8080
    assert s.database_url("alumnos") == "sqlite:///otra.db"


def test_unknown_exercise():
    with pytest.raises(ValueError):
        Settings(_env_file=None).database_url("bandas")
