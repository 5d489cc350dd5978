"""任务统计与筛选

列表筛选和统计都是对已加载任务的纯函数计算，不访问数据源。
"""

from collections.abc import Iterable

from pydantic import BaseModel, Field

from .enums import TasksFilterType
from .task import Task


def filter_tasks(tasks: Iterable[Task], filter_type: TasksFilterType) -> list[Task]:
    """按筛选类型过滤任务，保持输入顺序

    Args:
        tasks: 任务序列
        filter_type: 筛选类型

    Returns:
        过滤后的任务列表
    """
    if filter_type == TasksFilterType.ACTIVE_TASKS:
        return [task for task in tasks if task.is_active]
    if filter_type == TasksFilterType.COMPLETED_TASKS:
        return [task for task in tasks if task.is_completed]
    return list(tasks)


class TaskStatistics(BaseModel):
    """活跃/已完成任务计数"""

    active_count: int = Field(default=0, ge=0, description="活跃任务数")
    completed_count: int = Field(default=0, ge=0, description="已完成任务数")

    @property
    def total(self) -> int:
        return self.active_count + self.completed_count

    @property
    def active_percent(self) -> float:
        if self.total == 0:
            return 0.0
        return 100.0 * self.active_count / self.total

    @property
    def completed_percent(self) -> float:
        if self.total == 0:
            return 0.0
        return 100.0 * self.completed_count / self.total

    @classmethod
    def from_tasks(cls, tasks: Iterable[Task]) -> "TaskStatistics":
        """统计任务列表中的活跃与已完成数量"""
        active = 0
        completed = 0
        for task in tasks:
            if task.is_completed:
                completed += 1
            else:
                active += 1
        return cls(active_count=active, completed_count=completed)
