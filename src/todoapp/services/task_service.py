"""TaskService -- 任务列表/编辑/统计业务逻辑

位于 TasksRepository 之上，供展示层调用：
1. 按筛选类型加载任务（可强制从远端刷新）
2. 创建任务时拒绝空任务，编辑任务时保留原 task_id
3. 统计活跃与已完成任务数量
"""

import structlog

from ..exceptions import EmptyTaskError, TaskNotFoundError
from ..models import Task, TasksFilterType, TaskStatistics, filter_tasks
from ..store.protocols import TasksDataSource

log = structlog.get_logger()


class TaskService:
    """任务业务服务"""

    def __init__(self, repository: TasksDataSource) -> None:
        self._repository = repository

    async def load_tasks(
        self,
        filter_type: TasksFilterType = TasksFilterType.ALL_TASKS,
        force_update: bool = False,
    ) -> list[Task] | None:
        """加载任务列表

        Args:
            filter_type: 筛选类型
            force_update: True 时先将缓存标记为脏，从远端重新加载

        Returns:
            过滤后的任务列表；数据不可用时返回 None
        """
        if force_update:
            await self._repository.refresh_tasks()

        tasks = await self._repository.get_tasks()
        if tasks is None:
            log.info("load_tasks_unavailable", filter_type=filter_type.value)
            return None
        return filter_tasks(tasks, filter_type)

    async def get_task(self, task_id: str) -> Task:
        """查询单个任务

        Raises:
            TaskNotFoundError: 所有数据源均无该任务
        """
        task = await self._repository.get_task(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    async def create_task(self, title: str | None, description: str | None) -> Task:
        """创建新任务

        Raises:
            EmptyTaskError: 标题和描述均为空
        """
        task = Task(title=title, description=description)
        if task.is_empty:
            raise EmptyTaskError()
        await self._repository.save_task(task)
        log.info("task_created", task_id=task.task_id)
        return task

    async def update_task(
        self,
        task_id: str,
        title: str | None,
        description: str | None,
    ) -> Task:
        """以相同 task_id 保存编辑后的任务（编辑后任务为活跃状态）"""
        task = Task(task_id=task_id, title=title, description=description)
        await self._repository.save_task(task)
        log.info("task_updated", task_id=task_id)
        return task

    async def complete_task(self, task_id: str) -> None:
        await self._repository.complete_task(task_id)

    async def activate_task(self, task_id: str) -> None:
        await self._repository.activate_task(task_id)

    async def delete_task(self, task_id: str) -> None:
        await self._repository.delete_task(task_id)

    async def clear_completed_tasks(self) -> None:
        await self._repository.clear_completed_tasks()

    async def get_statistics(self, force_update: bool = False) -> TaskStatistics | None:
        """统计活跃与已完成任务，数据不可用时返回 None"""
        tasks = await self.load_tasks(force_update=force_update)
        if tasks is None:
            return None
        return TaskStatistics.from_tasks(tasks)
