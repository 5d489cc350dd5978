"""todoapp Services -- 面向调用方的任务用例"""

from .task_service import TaskService

__all__ = ["TaskService"]
