"""TasksDataSource Protocol 接口定义

本地数据源、远端数据源和 TasksRepository 共同实现的能力契约，
使用 Python Protocol 实现结构化子类型（duck typing）。

读操作只有两种结果：返回数据，或返回 None 表示"不可用"
（空库、未知 id）。"不可用"是合法的空结果，不是错误。
"""

from typing import Protocol

from ..models.task import Task


class TasksDataSource(Protocol):
    """任务数据源接口"""

    async def get_tasks(self) -> list[Task] | None:
        """查询全部任务，无任务时返回 None"""
        ...

    async def get_task(self, task_id: str) -> Task | None:
        """根据 task_id 查询任务，不存在时返回 None"""
        ...

    async def save_task(self, task: Task) -> None:
        """按 task_id 插入或更新任务"""
        ...

    async def complete_task(self, task: Task | str) -> None:
        """将任务标记为已完成，可传 Task 或 task_id"""
        ...

    async def activate_task(self, task: Task | str) -> None:
        """将任务标记为活跃，可传 Task 或 task_id"""
        ...

    async def clear_completed_tasks(self) -> None:
        """删除所有已完成任务"""
        ...

    async def delete_task(self, task_id: str) -> None:
        """删除指定任务"""
        ...

    async def delete_all_tasks(self) -> None:
        """删除全部任务"""
        ...

    async def refresh_tasks(self) -> None:
        """刷新提示；具体数据源可以忽略"""
        ...
