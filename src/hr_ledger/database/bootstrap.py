from __future__ import annotations

import logging

import mysql.connector

from .connection import DBConfig

logger = logging.getLogger(__name__)

KV_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS kv_store (
    store_key VARCHAR(64) NOT NULL PRIMARY KEY,
    payload LONGTEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
)
"""


def ensure_database(db_config: dict) -> None:
    """Create the database (if missing) and the key-value table.

    Idempotent: safe to run on every startup.
    """
    target = DBConfig.from_dict(db_config)

    server = mysql.connector.connect(
        host=target.host,
        port=target.port,
        user=target.user,
        password=target.password,
    )
    try:
        cur = server.cursor()
        try:
            cur.execute(
                f"CREATE DATABASE IF NOT EXISTS `{target.database}` "
                "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
            )
            cur.execute(f"USE `{target.database}`")
            cur.execute(KV_TABLE_DDL)
            server.commit()
        finally:
            cur.close()
    finally:
        server.close()

    logger.info("kv_store ready in %s@%s/%s", target.user, target.host, target.database)


def list_keys(db_config: dict) -> list[str]:
    target = DBConfig.from_dict(db_config)
    conn = mysql.connector.connect(
        host=target.host,
        port=target.port,
        user=target.user,
        password=target.password,
        database=target.database,
    )
    try:
        cur = conn.cursor()
        try:
            cur.execute("SELECT store_key FROM kv_store ORDER BY store_key")
            return [str(r[0]) for r in cur.fetchall()]
        finally:
            cur.close()
    finally:
        conn.close()
