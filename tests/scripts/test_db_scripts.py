from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest

SCRIPTS_DIR = Path(__file__).resolve().parents[2] / "scripts"


def _load(name: str):
    module_spec = importlib.util.spec_from_file_location(f"script_{name}", SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


@pytest.fixture
def init_db():
    return _load("init_db")


def test_init_db_applies_schema_and_checks_tables(init_db, monkeypatch, capsys):
    applied = []
    monkeypatch.setattr(init_db, "apply_schema", lambda db_config, *, schema_path: applied.append(schema_path))
    monkeypatch.setattr(init_db, "list_tables", lambda db_config: ["attendance", "audit_logs", "drivers"])

    assert init_db.main() == 0
    assert applied == [init_db.SCHEMA_PATH]
    assert "OK: ledger schema ready" in capsys.readouterr().out


def test_init_db_reports_missing_tables(init_db, monkeypatch, capsys):
    monkeypatch.setattr(init_db, "apply_schema", lambda db_config, *, schema_path: None)
    monkeypatch.setattr(init_db, "list_tables", lambda db_config: ["drivers"])

    assert init_db.main() == 1
    assert "attendance, audit_logs" in capsys.readouterr().err


def test_seed_db_loads_seed_file(monkeypatch):
    seed_db = _load("seed_db")
    seeded = []
    monkeypatch.setattr(seed_db, "apply_seed_sql", lambda db_config, *, seed_path: seeded.append(seed_path))

    assert seed_db.main() == 0
    assert seeded == [seed_db.SEED_PATH]
    assert seed_db.SEED_PATH.is_file()
