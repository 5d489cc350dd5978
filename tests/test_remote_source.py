"""InMemoryTasksRemoteDataSource 单元测试"""

import asyncio

from todoapp.models import Task
from todoapp.store.remote_source import DEFAULT_SEED_TASKS, InMemoryTasksRemoteDataSource


class TestRemoteSource:
    """内存远端数据源测试"""

    async def test_empty_store_not_available(self, remote_source):
        assert await remote_source.get_tasks() is None
        assert await remote_source.get_task("missing") is None

    async def test_seeded_tasks_in_order(self):
        remote = InMemoryTasksRemoteDataSource(tasks=DEFAULT_SEED_TASKS)
        tasks = await remote.get_tasks()
        assert [t.title for t in tasks] == ["Build tower in Pisa", "Finish bridge in Tacoma"]

    async def test_instances_do_not_share_state(self):
        """数据归属实例，不同实例互不影响"""
        r1 = InMemoryTasksRemoteDataSource()
        r2 = InMemoryTasksRemoteDataSource()
        r1.add_tasks(Task(title="only in r1"))

        assert await r1.get_tasks() is not None
        assert await r2.get_tasks() is None

    async def test_save_and_get(self, remote_source):
        task = Task(title="title")
        await remote_source.save_task(task)
        assert await remote_source.get_task(task.task_id) == task

    async def test_complete_and_activate(self, remote_source):
        task = Task(title="title")
        remote_source.add_tasks(task)

        await remote_source.complete_task(task)
        assert (await remote_source.get_task(task.task_id)).is_completed

        await remote_source.activate_task(task.task_id)
        assert (await remote_source.get_task(task.task_id)).is_active

    async def test_complete_unknown_id_is_ignored(self, remote_source):
        await remote_source.complete_task("missing")
        assert await remote_source.get_tasks() is None

    async def test_clear_completed_and_delete(self, remote_source):
        active = Task(title="active")
        done = Task(title="done", completed=True)
        other = Task(title="other")
        remote_source.add_tasks(active, done, other)

        await remote_source.clear_completed_tasks()
        assert await remote_source.get_tasks() == [active, other]

        await remote_source.delete_task(active.task_id)
        assert await remote_source.get_tasks() == [other]

        await remote_source.delete_all_tasks()
        assert await remote_source.get_tasks() is None

    async def test_simulated_latency(self):
        """配置延迟后调用会让出事件循环"""
        remote = InMemoryTasksRemoteDataSource(tasks=[Task(title="t")], latency_ms=20)
        loop = asyncio.get_running_loop()
        start = loop.time()
        await remote.get_tasks()
        assert loop.time() - start >= 0.015
