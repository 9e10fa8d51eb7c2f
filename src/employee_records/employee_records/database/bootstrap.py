from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Mapping

import mysql.connector
from werkzeug.security import generate_password_hash

from ..core.enums import Role
from .connection import DBConfig

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_PATH = Path(__file__).resolve().parents[4] / "database" / "schema.sql"


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def iter_sql_statements(sql: str) -> Iterable[str]:
    """Split a schema file into statements.

    ';' ends a statement unless it sits inside a quoted string. '--' comments
    outside quotes run to the end of the line and are dropped.
    """
    buf: list[str] = []
    in_single = False
    in_double = False
    in_comment = False
    escape = False

    for i, ch in enumerate(sql):
        if in_comment:
            if ch == "\n":
                in_comment = False
                buf.append(ch)
            continue

        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\" and (in_single or in_double):
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
            buf.append(ch)
            continue

        if ch == '"' and not in_single:
            in_double = not in_double
            buf.append(ch)
            continue

        if ch == "-" and not in_single and not in_double and sql.startswith("--", i):
            in_comment = True
            continue

        if ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(db_config: Mapping) -> None:
    target = DBConfig.from_mapping(db_config)
    conn = mysql.connector.connect(**target.connect_kwargs(with_database=False))
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: Mapping, *, schema_path: str | Path = DEFAULT_SCHEMA_PATH) -> None:
    target = DBConfig.from_mapping(db_config)
    ensure_database_exists(db_config)

    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))

    conn = mysql.connector.connect(**target.connect_kwargs())
    try:
        cur = conn.cursor()
        for stmt in iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Schema applied to %s", target.describe())


def ensure_admin_user(db_config: Mapping, *, user_id: str, password: str, full_name: str = "Administrator") -> None:
    """Create or reset an admin account with placeholder profile fields."""
    target = DBConfig.from_mapping(db_config)
    conn = mysql.connector.connect(**target.connect_kwargs())
    try:
        cur = conn.cursor()
        cur.execute(
            """
            INSERT INTO employees (
                user_id, full_name, designation, department, qualification_ug, qualification_pg,
                qualification_phd, date_of_birth, date_of_joining, password_hash, role
            )
            VALUES (%s, %s, 'Administrator', 'Administration', '-', '-', '-', CURDATE(), CURDATE(), %s, %s)
            ON DUPLICATE KEY UPDATE password_hash=VALUES(password_hash), role=VALUES(role)
            """,
            (user_id, full_name, generate_password_hash(password), Role.ADMIN.value),
        )
        conn.commit()
    finally:
        conn.close()


def list_tables(db_config: Mapping) -> list[str]:
    target = DBConfig.from_mapping(db_config)
    conn = mysql.connector.connect(**target.connect_kwargs())
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
