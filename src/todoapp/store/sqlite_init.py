"""SQLite 数据库初始化

PRAGMA 配置 + tasks 表 DDL。
使用 aiosqlite 异步操作。
"""

import aiosqlite

# tasks 表 DDL（rowid 保留插入顺序）
_TASKS_DDL = """
CREATE TABLE IF NOT EXISTS tasks (
    entryid     TEXT PRIMARY KEY,
    title       TEXT,
    description TEXT,
    completed   INTEGER NOT NULL DEFAULT 0
);
"""

_TASKS_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_tasks_completed ON tasks(completed);",
]


async def init_db(conn: aiosqlite.Connection) -> None:
    """初始化数据库：设置 PRAGMA + 创建表 + 创建索引

    Args:
        conn: aiosqlite 数据库连接
    """
    await conn.execute("PRAGMA journal_mode = WAL;")
    await conn.execute("PRAGMA busy_timeout = 5000;")

    await conn.execute(_TASKS_DDL)
    for idx_sql in _TASKS_INDEXES:
        await conn.execute(idx_sql)

    await conn.commit()


async def verify_wal_mode(conn: aiosqlite.Connection) -> bool:
    """验证 WAL 模式是否生效

    Returns:
        True 如果 WAL 模式已启用
    """
    cursor = await conn.execute("PRAGMA journal_mode;")
    row = await cursor.fetchone()
    return row is not None and row[0].lower() == "wal"
