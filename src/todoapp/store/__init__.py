"""todoapp Store -- 数据源与任务仓库

提供工厂函数创建共享数据库连接的 Store 实例组。
"""

from pathlib import Path

import aiosqlite

from ..models.task import Task
from .local_source import SqliteTasksDataSource
from .protocols import TasksDataSource
from .remote_source import DEFAULT_SEED_TASKS, InMemoryTasksRemoteDataSource
from .repository import TasksRepository
from .sqlite_init import init_db


class StoreGroup:
    """Store 实例组 -- 本地数据源、远端数据源和仓库"""

    def __init__(
        self,
        conn: aiosqlite.Connection,
        remote: InMemoryTasksRemoteDataSource,
    ) -> None:
        self.conn = conn
        self.local = SqliteTasksDataSource(conn)
        self.remote = remote
        self.repository = TasksRepository(remote=self.remote, local=self.local)

    async def close(self) -> None:
        await self.conn.close()


async def create_store_group(
    db_path: str,
    remote_tasks: list[Task] | tuple[Task, ...] = (),
    remote_latency_ms: int = 0,
) -> StoreGroup:
    """创建 Store 实例组

    Args:
        db_path: SQLite 数据库文件路径
        remote_tasks: 远端服务的初始数据
        remote_latency_ms: 远端调用的模拟延迟（毫秒）

    Returns:
        StoreGroup 实例
    """
    # 确保数据库目录存在
    db_dir = Path(db_path).parent
    db_dir.mkdir(parents=True, exist_ok=True)

    conn = await aiosqlite.connect(db_path)
    await init_db(conn)

    remote = InMemoryTasksRemoteDataSource(
        tasks=remote_tasks,
        latency_ms=remote_latency_ms,
    )
    return StoreGroup(conn=conn, remote=remote)


__all__ = [
    "StoreGroup",
    "create_store_group",
    "TasksDataSource",
    "TasksRepository",
    "SqliteTasksDataSource",
    "InMemoryTasksRemoteDataSource",
    "DEFAULT_SEED_TASKS",
    "init_db",
]
