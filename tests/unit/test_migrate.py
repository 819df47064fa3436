from pathlib import Path

import pytest

from app.infrastructure.db import migrate


def test_bundled_migrations_create_users_and_posts():
    paths = migrate.list_migrations()
    assert paths, "expected at least one migration"
    sql = "\n".join(p.read_text(encoding="utf-8") for p in paths)
    assert "CREATE TABLE IF NOT EXISTS users" in sql
    assert "CREATE TABLE IF NOT EXISTS posts" in sql


def test_list_and_pending(tmp_path: Path):
    for name in ("20240102_0000_b.sql", "20240101_0000_a.sql", "notes.txt"):
        (tmp_path / name).write_text("-- sql\n", encoding="utf-8")

    paths = migrate.list_migrations(tmp_path)

    assert [p.stem for p in paths] == ["20240101_0000_a", "20240102_0000_b"]
    assert [p.stem for p in migrate.pending(paths, {"20240101_0000_a"})] == [
        "20240102_0000_b"
    ]


def test_missing_directory(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        migrate.list_migrations(tmp_path / "nope")


def test_usage_errors_return_2(capsys):
    assert migrate.main(["migrate"]) == 2
    assert migrate.main(["migrate", "sideways"]) == 2
    assert "usage:" in capsys.readouterr().err
