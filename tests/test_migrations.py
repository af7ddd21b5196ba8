"""
tests.test_migrations

The Alembic revision produces the same schema (and duplicate guard) as the ORM metadata.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.exc import IntegrityError

ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def migrated_db(tmp_path, monkeypatch) -> Path:
    db = tmp_path / "migrated.db"
    monkeypatch.setenv("STUDENT_ASSIGNMENT_DATABASE_URL", f"sqlite+aiosqlite:///{db}")
    command.upgrade(Config(str(ROOT / "alembic.ini")), "head")
    return db


def test_upgrade_creates_tables_and_unique_names(migrated_db: Path) -> None:
    engine = create_engine(f"sqlite:///{migrated_db}")
    try:
        insp = inspect(engine)
        assert {"students", "projects", "project_students"} <= set(insp.get_table_names())
        for table in ("students", "projects"):
            uniques = insp.get_unique_constraints(table)
            assert [u["column_names"] for u in uniques] == [["name"]]
        assert insp.get_pk_constraint("project_students")["constrained_columns"] == [
            "project_id",
            "student_id",
        ]

        with engine.begin() as conn:
            conn.execute(text("INSERT INTO students (id, name) VALUES ('a', 'Zed')"))
        with pytest.raises(IntegrityError):
            with engine.begin() as conn:
                conn.execute(text("INSERT INTO students (id, name) VALUES ('b', 'Zed')"))
    finally:
        engine.dispose()


def test_downgrade_drops_everything(migrated_db: Path) -> None:
    command.downgrade(Config(str(ROOT / "alembic.ini")), "base")
    engine = create_engine(f"sqlite:///{migrated_db}")
    try:
        assert set(inspect(engine).get_table_names()) <= {"alembic_version"}
    finally:
        engine.dispose()


def test_config_declares_path_separator() -> None:
    cfg = Config(str(ROOT / "alembic.ini"))
    assert cfg.get_main_option("path_separator") == "os"
    assert cfg.get_main_option("prepend_sys_path") == "."
