"""TasksRepository -- 缓存 + 本地 + 远端的任务仓库

读取顺序：缓存 -> 本地 -> 远端，取最先可用的结果。
仅在本地库为空（或缓存被标记为脏）时才访问远端；
从远端取回数据后同时刷新缓存和本地库。

写操作依次写远端、本地，最后更新缓存。三处之间没有事务，
任一后端写入抛出异常时后续步骤不再执行，异常抛给调用方。
"""

from collections.abc import Awaitable, Mapping
from types import MappingProxyType
from typing import TypeVar

import structlog

from ..exceptions import TaskNotCachedError
from ..models.task import Task
from .protocols import TasksDataSource

log = structlog.get_logger()

T = TypeVar("T")


class TasksRepository:
    """TasksDataSource 的缓存门面实现

    缓存与脏标记归属于仓库实例，随实例创建与销毁。
    缓存只在 await 之间的同步代码中修改，由事件循环串行化。
    """

    def __init__(self, remote: TasksDataSource, local: TasksDataSource) -> None:
        self._remote = remote
        self._local = local
        # None 表示缓存尚未建立；空 dict 表示缓存已建立但没有任务
        self._cached_tasks: dict[str, Task] | None = None
        self._cache_is_dirty = False

    @property
    def cache_is_dirty(self) -> bool:
        return self._cache_is_dirty

    @property
    def cached_tasks(self) -> Mapping[str, Task] | None:
        """缓存的只读快照，缓存未建立时为 None"""
        if self._cached_tasks is None:
            return None
        return MappingProxyType(dict(self._cached_tasks))

    async def get_tasks(self) -> list[Task] | None:
        """查询全部任务

        Returns:
            任务列表（缓存插入顺序）；本地与远端均不可用时返回 None
        """
        if self._cached_tasks is not None and not self._cache_is_dirty:
            log.debug("tasks_cache_hit", count=len(self._cached_tasks))
            return list(self._cached_tasks.values())

        if self._cache_is_dirty:
            return await self._get_tasks_from_remote()

        tasks = await self._read("local", self._local.get_tasks())
        if tasks is None:
            log.info("local_tasks_unavailable_fallback_to_remote")
            return await self._get_tasks_from_remote()

        self._refresh_cache(tasks)
        return list(self._cached_tasks.values())

    async def get_task(self, task_id: str) -> Task | None:
        """根据 task_id 查询任务

        Returns:
            对应任务；缓存、本地、远端均没有时返回 None
        """
        cached = self._get_task_with_id(task_id)
        if cached is not None:
            return cached

        task = await self._read("local", self._local.get_task(task_id))
        if task is None:
            task = await self._read("remote", self._remote.get_task(task_id))
        if task is None:
            log.info("task_unavailable", task_id=task_id)
            return None

        self._put_cache(task)
        return task

    async def save_task(self, task: Task) -> None:
        await self._remote.save_task(task)
        await self._local.save_task(task)
        self._put_cache(task)

    async def complete_task(self, task: Task | str) -> None:
        """标记任务为已完成

        传入 task_id 时通过缓存解析，任务必须已加载进缓存。

        Raises:
            TaskNotCachedError: task_id 不在缓存中
        """
        if isinstance(task, str):
            task = self._require_cached(task)
        await self._remote.complete_task(task)
        await self._local.complete_task(task)
        self._put_cache(task.as_completed())

    async def activate_task(self, task: Task | str) -> None:
        """标记任务为活跃

        Raises:
            TaskNotCachedError: task_id 不在缓存中
        """
        if isinstance(task, str):
            task = self._require_cached(task)
        await self._remote.activate_task(task)
        await self._local.activate_task(task)
        self._put_cache(task.as_active())

    async def clear_completed_tasks(self) -> None:
        await self._remote.clear_completed_tasks()
        await self._local.clear_completed_tasks()
        cache = self._ensure_cache()
        for task_id in [tid for tid, task in cache.items() if task.is_completed]:
            del cache[task_id]

    async def delete_task(self, task_id: str) -> None:
        await self._remote.delete_task(task_id)
        await self._local.delete_task(task_id)
        # 缓存未建立时不创建空缓存，否则下次 get_tasks 会跳过本地
        if self._cached_tasks is not None:
            self._cached_tasks.pop(task_id, None)

    async def delete_all_tasks(self) -> None:
        await self._remote.delete_all_tasks()
        await self._local.delete_all_tasks()
        self._ensure_cache().clear()

    async def refresh_tasks(self) -> None:
        """标记缓存为脏，下一次 get_tasks 直接访问远端"""
        self._cache_is_dirty = True
        log.debug("tasks_cache_marked_dirty")

    async def _get_tasks_from_remote(self) -> list[Task] | None:
        tasks = await self._read("remote", self._remote.get_tasks())
        if tasks is None:
            log.info("remote_tasks_unavailable")
            return None

        self._refresh_cache(tasks)
        await self._refresh_local(tasks)
        return list(self._cached_tasks.values())

    def _refresh_cache(self, tasks: list[Task]) -> None:
        self._cached_tasks = {task.task_id: task for task in tasks}
        self._cache_is_dirty = False
        log.debug("tasks_cache_refreshed", count=len(tasks))

    async def _refresh_local(self, tasks: list[Task]) -> None:
        await self._local.delete_all_tasks()
        for task in tasks:
            await self._local.save_task(task)

    async def _read(self, source: str, call: Awaitable[T]) -> T | None:
        """执行后端读操作；后端抛出的异常按"不可用"处理"""
        try:
            return await call
        except Exception as e:
            log.warning("data_source_read_failed", source=source, error=str(e))
            return None

    def _ensure_cache(self) -> dict[str, Task]:
        if self._cached_tasks is None:
            self._cached_tasks = {}
        return self._cached_tasks

    def _put_cache(self, task: Task) -> None:
        self._ensure_cache()[task.task_id] = task

    def _get_task_with_id(self, task_id: str) -> Task | None:
        if not self._cached_tasks:
            return None
        return self._cached_tasks.get(task_id)

    def _require_cached(self, task_id: str) -> Task:
        task = self._get_task_with_id(task_id)
        if task is None:
            raise TaskNotCachedError(task_id)
        return task
