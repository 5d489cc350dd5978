"""远端数据源 -- 内存实现的远端服务替身

每次调用前模拟网络延迟（asyncio.sleep）。
数据由实例持有，不在实例之间共享。
"""

import asyncio

import structlog

from ..models.task import Task

log = structlog.get_logger()

# 远端服务的示例数据（固定 task_id，跨进程保持一致）
DEFAULT_SEED_TASKS: tuple[Task, ...] = (
    Task(
        task_id="seed-pisa",
        title="Build tower in Pisa",
        description="Ground looks good, no foundation work required.",
    ),
    Task(
        task_id="seed-tacoma",
        title="Finish bridge in Tacoma",
        description="Found awesome girders at half the cost!",
    ),
)


class InMemoryTasksRemoteDataSource:
    """TasksDataSource 的内存实现（模拟远端服务）"""

    def __init__(
        self,
        tasks: list[Task] | tuple[Task, ...] = (),
        latency_ms: int = 0,
    ) -> None:
        """
        Args:
            tasks: 初始数据
            latency_ms: 每次调用的模拟延迟（毫秒）
        """
        self._tasks: dict[str, Task] = {}
        self._latency_s = max(0, latency_ms) / 1000
        self.add_tasks(*tasks)

    def add_tasks(self, *tasks: Task) -> None:
        """直接预置数据（不经过模拟延迟）"""
        for task in tasks:
            self._tasks[task.task_id] = task

    async def _simulate_latency(self) -> None:
        if self._latency_s > 0:
            await asyncio.sleep(self._latency_s)

    async def get_tasks(self) -> list[Task] | None:
        await self._simulate_latency()
        if not self._tasks:
            return None
        return list(self._tasks.values())

    async def get_task(self, task_id: str) -> Task | None:
        await self._simulate_latency()
        return self._tasks.get(task_id)

    async def save_task(self, task: Task) -> None:
        await self._simulate_latency()
        self._tasks[task.task_id] = task

    async def complete_task(self, task: Task | str) -> None:
        await self._simulate_latency()
        self._set_completed(task, True)

    async def activate_task(self, task: Task | str) -> None:
        await self._simulate_latency()
        self._set_completed(task, False)

    async def clear_completed_tasks(self) -> None:
        await self._simulate_latency()
        self._tasks = {
            task_id: task for task_id, task in self._tasks.items() if task.is_active
        }

    async def delete_task(self, task_id: str) -> None:
        await self._simulate_latency()
        self._tasks.pop(task_id, None)

    async def delete_all_tasks(self) -> None:
        await self._simulate_latency()
        self._tasks.clear()

    async def refresh_tasks(self) -> None:
        return None

    def _set_completed(self, task: Task | str, completed: bool) -> None:
        if isinstance(task, str):
            # 按 id 更新时只能基于服务端已有记录
            current = self._tasks.get(task)
            if current is None:
                log.warning("remote_task_missing", task_id=task)
                return
            task = current
        self._tasks[task.task_id] = task.model_copy(update={"completed": completed})
