"""todoapp 异常体系

读操作的"不可用"以 None 表达，不属于异常；
这里只定义调用方用法错误和业务校验失败。
"""


class TodoAppError(Exception):
    """todoapp 基础异常"""


class TaskNotCachedError(TodoAppError, KeyError):
    """按 id 完成/激活任务时，该任务尚未加载进缓存"""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"任务未在缓存中: {task_id}")
        self.task_id = task_id

    def __str__(self) -> str:
        # KeyError 默认会给消息加引号
        return str(self.args[0])


class TaskNotFoundError(TodoAppError):
    """本地与远端均无该任务"""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"任务不存在: {task_id}")
        self.task_id = task_id


class EmptyTaskError(TodoAppError, ValueError):
    """标题和描述均为空的任务不允许保存"""

    def __init__(self) -> None:
        super().__init__("任务标题和描述不能同时为空")
