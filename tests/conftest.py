"""全局 pytest 配置 -- 临时 SQLite 数据库与数据源 fixture"""

from collections.abc import AsyncGenerator
from pathlib import Path
from unittest.mock import AsyncMock

import aiosqlite
import pytest
import pytest_asyncio
from todoapp.store.local_source import SqliteTasksDataSource
from todoapp.store.remote_source import InMemoryTasksRemoteDataSource
from todoapp.store.sqlite_init import init_db


@pytest_asyncio.fixture
async def tmp_db_path(tmp_path: Path) -> Path:
    """提供临时 SQLite 数据库路径"""
    return tmp_path / "test.db"


@pytest_asyncio.fixture
async def db_conn(tmp_db_path: Path) -> AsyncGenerator[aiosqlite.Connection, None]:
    """提供已初始化的临时 SQLite 数据库连接"""
    conn = await aiosqlite.connect(str(tmp_db_path))
    await init_db(conn)
    yield conn
    await conn.close()


@pytest_asyncio.fixture
async def local_source(db_conn: aiosqlite.Connection) -> SqliteTasksDataSource:
    """基于临时数据库的本地数据源"""
    return SqliteTasksDataSource(db_conn)


@pytest.fixture
def remote_source() -> InMemoryTasksRemoteDataSource:
    """无延迟的空远端数据源"""
    return InMemoryTasksRemoteDataSource()


def _make_mock_source() -> AsyncMock:
    source = AsyncMock()
    source.get_tasks = AsyncMock(return_value=None)
    source.get_task = AsyncMock(return_value=None)
    return source


@pytest.fixture
def mock_remote() -> AsyncMock:
    """Mock 远端数据源（默认读操作不可用）"""
    return _make_mock_source()


@pytest.fixture
def mock_local() -> AsyncMock:
    """Mock 本地数据源（默认读操作不可用）"""
    return _make_mock_source()
