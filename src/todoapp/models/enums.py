"""枚举定义 -- 任务列表筛选类型"""

from enum import StrEnum


class TasksFilterType(StrEnum):
    """任务列表筛选类型"""

    ALL_TASKS = "all"
    ACTIVE_TASKS = "active"
    COMPLETED_TASKS = "completed"
