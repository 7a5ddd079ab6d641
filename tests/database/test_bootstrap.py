from pathlib import Path

from worktime.database.bootstrap import _strip_create_db_and_use, iter_sql_statements
from worktime.database.connection import DBConfig


def test_iter_sql_statements_keeps_semicolons_in_quotes():
    sql = "INSERT INTO teams(name) VALUES('a;b');\n-- comment; here\nSELECT 1;"

    assert list(iter_sql_statements(sql)) == ["INSERT INTO teams(name) VALUES('a;b')", "SELECT 1"]


def test_schema_file_splits_into_table_statements():
    schema = Path(__file__).resolve().parents[2] / "database" / "schema.sql"
    sql = _strip_create_db_and_use(schema.read_text(encoding="utf-8"))

    statements = list(iter_sql_statements(sql))

    assert len(statements) == 3
    assert all(s.startswith("CREATE TABLE IF NOT EXISTS") for s in statements)


def test_db_config_from_dict_defaults():
    config = DBConfig.from_dict({"host": "db", "password": "pw"})

    assert config.port == 3306
    assert config.database == "worktime_db"
    assert config.describe() == "root@db:3306/worktime_db"


def test_iter_sql_statements_skips_trailing_comment():
    sql = "SELECT 1; -- a; b\nSELECT 'x--y';"

    assert list(iter_sql_statements(sql)) == ["SELECT 1", "SELECT 'x--y'"]
