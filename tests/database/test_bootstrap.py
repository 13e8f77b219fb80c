from __future__ import annotations

from src.staff_scheduling.staff_scheduling.database.bootstrap import _strip_create_db_and_use, iter_sql_statements


def test_splits_on_semicolons_outside_quotes():
    sql = """
    -- staff table
    CREATE TABLE staff (id INT);
    INSERT INTO staff(name) VALUES('a;b');
    INSERT INTO staff(name) VALUES("it\\'s; fine")
    """

    stmts = list(iter_sql_statements(sql))

    assert stmts == [
        "CREATE TABLE staff (id INT)",
        "INSERT INTO staff(name) VALUES('a;b')",
        "INSERT INTO staff(name) VALUES(\"it\\'s; fine\")",
    ]


def test_comment_only_and_blank_input():
    assert list(iter_sql_statements("-- nothing here\n\n  ;  ;")) == []


def test_strips_database_selection():
    sql = "CREATE DATABASE IF NOT EXISTS foo;\nUSE foo;\nCREATE TABLE t (id INT);\n"
    assert list(iter_sql_statements(_strip_create_db_and_use(sql))) == ["CREATE TABLE t (id INT)"]
