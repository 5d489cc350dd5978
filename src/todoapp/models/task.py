"""Task Domain Model

Task 是不可变值对象：编辑产生新的 Task（相同 task_id），
通过仓库的 save_task 持久化。
"""

from pydantic import BaseModel, ConfigDict, Field
from ulid import ULID


def new_task_id() -> str:
    """生成新的任务 ID（ULID 格式）"""
    return str(ULID())


class Task(BaseModel):
    """Task 数据模型

    task_id 一旦分配不再变化，在缓存、本地与远端之间唯一标识一个任务。
    """

    model_config = ConfigDict(frozen=True)

    task_id: str = Field(default_factory=new_task_id, description="唯一标识，ULID 格式")
    title: str | None = Field(default=None, description="任务标题")
    description: str | None = Field(default=None, description="任务描述")
    completed: bool = Field(default=False, description="是否已完成")

    @property
    def is_completed(self) -> bool:
        return self.completed

    @property
    def is_active(self) -> bool:
        return not self.completed

    @property
    def is_empty(self) -> bool:
        """标题和描述均为空（None 或空串）"""
        return not self.title and not self.description

    @property
    def title_for_list(self) -> str | None:
        """列表展示用标题：标题为空时退回描述"""
        return self.title if self.title else self.description

    def as_completed(self) -> "Task":
        """返回 completed=True 的副本"""
        return self.model_copy(update={"completed": True})

    def as_active(self) -> "Task":
        """返回 completed=False 的副本"""
        return self.model_copy(update={"completed": False})
