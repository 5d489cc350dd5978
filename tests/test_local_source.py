"""SqliteTasksDataSource 单元测试

测试内容：
1. 空表返回"不可用"
2. 插入/查询/覆盖更新，插入顺序保持
3. 完成/激活/删除/清除已完成
4. 进程重启后数据仍在
"""

from pathlib import Path

import aiosqlite
from todoapp.models import Task
from todoapp.store.local_source import SqliteTasksDataSource
from todoapp.store.sqlite_init import init_db, verify_wal_mode


class TestLocalReads:
    """读操作测试"""

    async def test_empty_table_not_available(self, local_source):
        """新表或空表时 get_tasks 返回 None"""
        assert await local_source.get_tasks() is None

    async def test_unknown_id_not_available(self, local_source):
        assert await local_source.get_task("missing") is None

    async def test_insert_and_get_by_id(self, local_source):
        task = Task(task_id="id", title="title", description="description", completed=True)
        await local_source.save_task(task)

        loaded = await local_source.get_task("id")
        assert loaded == task

    async def test_get_tasks_in_insertion_order(self, local_source):
        tasks = [Task(task_id=f"id-{i}", title=f"title {i}") for i in (3, 1, 2)]
        for task in tasks:
            await local_source.save_task(task)

        assert await local_source.get_tasks() == tasks


class TestLocalWrites:
    """写操作测试"""

    async def test_save_replaces_on_conflict(self, local_source):
        """相同 id 再次保存时覆盖内容且位置不变"""
        await local_source.save_task(Task(task_id="id", title="title", description="d"))
        await local_source.save_task(Task(task_id="other", title="other"))
        await local_source.save_task(
            Task(task_id="id", title="title2", description="description2", completed=True)
        )

        tasks = await local_source.get_tasks()
        assert [t.task_id for t in tasks] == ["id", "other"]
        assert tasks[0].title == "title2"
        assert tasks[0].description == "description2"
        assert tasks[0].completed is True

    async def test_complete_and_activate_by_task(self, local_source):
        task = Task(task_id="id", title="title")
        await local_source.save_task(task)

        await local_source.complete_task(task)
        assert (await local_source.get_task("id")).completed is True

        await local_source.activate_task(task)
        assert (await local_source.get_task("id")).completed is False

    async def test_complete_by_id(self, local_source):
        await local_source.save_task(Task(task_id="id", title="title"))
        await local_source.complete_task("id")
        assert (await local_source.get_task("id")).is_completed

    async def test_delete_task(self, local_source):
        await local_source.save_task(Task(task_id="a", title="a"))
        await local_source.save_task(Task(task_id="b", title="b"))

        await local_source.delete_task("a")

        assert await local_source.get_task("a") is None
        assert [t.task_id for t in await local_source.get_tasks()] == ["b"]

    async def test_delete_all_tasks(self, local_source):
        await local_source.save_task(Task(title="a"))
        await local_source.save_task(Task(title="b"))

        await local_source.delete_all_tasks()

        assert await local_source.get_tasks() is None

    async def test_clear_completed_tasks(self, local_source):
        await local_source.save_task(Task(task_id="1", title="a", completed=True))
        await local_source.save_task(Task(task_id="2", title="b"))
        await local_source.save_task(Task(task_id="3", title="c", completed=True))

        await local_source.clear_completed_tasks()

        remaining = await local_source.get_tasks()
        assert [t.task_id for t in remaining] == ["2"]

    async def test_nullable_title_and_description(self, local_source):
        await local_source.save_task(Task(task_id="id"))
        loaded = await local_source.get_task("id")
        assert loaded.title is None
        assert loaded.description is None

    async def test_refresh_is_noop(self, local_source):
        await local_source.save_task(Task(task_id="id", title="t"))
        await local_source.refresh_tasks()
        assert await local_source.get_task("id") is not None


class TestLocalDurability:
    """进程重启持久性测试"""

    async def test_data_survives_restart(self, tmp_path: Path):
        """写入 → 关闭连接 → 重新打开 → 数据完整"""
        db_path = str(tmp_path / "durability.db")

        conn1 = await aiosqlite.connect(db_path)
        await init_db(conn1)
        await SqliteTasksDataSource(conn1).save_task(
            Task(task_id="dur-1", title="持久性测试任务", completed=True)
        )
        await conn1.close()

        conn2 = await aiosqlite.connect(db_path)
        await init_db(conn2)
        try:
            loaded = await SqliteTasksDataSource(conn2).get_task("dur-1")
            assert loaded is not None
            assert loaded.title == "持久性测试任务"
            assert loaded.completed is True
        finally:
            await conn2.close()

    async def test_wal_mode_enabled(self, db_conn):
        assert await verify_wal_mode(db_conn) is True
