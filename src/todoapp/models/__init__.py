"""todoapp Domain Models -- 公共类型导出

所有公共模型类型从此入口导入。
"""

from .enums import TasksFilterType
from .statistics import TaskStatistics, filter_tasks
from .task import Task, new_task_id

__all__ = [
    # Task
    "Task",
    "new_task_id",
    # 筛选
    "TasksFilterType",
    "filter_tasks",
    # 统计
    "TaskStatistics",
]
