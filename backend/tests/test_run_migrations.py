"""Tests for the migration runner's planning helpers."""

from pathlib import Path

from run_migrations import MIGRATIONS_DIR, discover_migrations, file_checksum, plan_migrations


class TestDiscoverMigrations:

    def test_bundled_migrations_in_order(self):
        names = [m.name for m in discover_migrations(MIGRATIONS_DIR)]
        assert names == sorted(names)
        assert "001_initial_schema.sql" in names
        assert "002_increment_user_points.sql" in names

    def test_missing_directory(self, tmp_path: Path):
        assert discover_migrations(tmp_path / "nope") == []


class TestPlanMigrations:

    def test_pending_and_changed(self, tmp_path: Path):
        (tmp_path / "001_a.sql").write_text("SELECT 1;")
        (tmp_path / "002_b.sql").write_text("SELECT 2;")
        (tmp_path / "003_c.sql").write_text("SELECT 3;")
        available = discover_migrations(tmp_path)

        applied = {
            "001_a.sql": file_checksum("SELECT 1;"),
            "002_b.sql": file_checksum("SELECT 'edited';"),
        }
        pending, changed = plan_migrations(available, applied)

        assert [m.name for m in pending] == ["003_c.sql"]
        assert [m.name for m in changed] == ["002_b.sql"]
