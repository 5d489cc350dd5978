"""本地数据源 -- TasksDataSource 的 SQLite 实现

每个写操作独立提交；失败时回滚并向上抛出。
表为空时 get_tasks 返回 None（表是新建的或已清空）。
"""

import aiosqlite
import structlog

from ..models.task import Task

log = structlog.get_logger()


def _task_id_of(task: Task | str) -> str:
    return task if isinstance(task, str) else task.task_id


class SqliteTasksDataSource:
    """TasksDataSource 的 SQLite 实现"""

    def __init__(self, conn: aiosqlite.Connection) -> None:
        self._conn = conn

    async def get_tasks(self) -> list[Task] | None:
        """查询全部任务，按插入顺序；表为空时返回 None"""
        cursor = await self._conn.execute(
            "SELECT entryid, title, description, completed FROM tasks ORDER BY rowid ASC"
        )
        rows = await cursor.fetchall()
        if not rows:
            return None
        return [self._row_to_task(row) for row in rows]

    async def get_task(self, task_id: str) -> Task | None:
        """根据 task_id 查询任务"""
        cursor = await self._conn.execute(
            "SELECT entryid, title, description, completed FROM tasks WHERE entryid = ?",
            (task_id,),
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_task(row)

    async def save_task(self, task: Task) -> None:
        """插入或更新任务（已存在的行保持原有位置）"""
        await self._write(
            """
            INSERT INTO tasks (entryid, title, description, completed)
            VALUES (?, ?, ?, ?)
            ON CONFLICT(entryid) DO UPDATE SET
                title = excluded.title,
                description = excluded.description,
                completed = excluded.completed
            """,
            (task.task_id, task.title, task.description, int(task.completed)),
        )

    async def complete_task(self, task: Task | str) -> None:
        await self._update_completed(_task_id_of(task), True)

    async def activate_task(self, task: Task | str) -> None:
        await self._update_completed(_task_id_of(task), False)

    async def clear_completed_tasks(self) -> None:
        await self._write("DELETE FROM tasks WHERE completed = 1")

    async def delete_task(self, task_id: str) -> None:
        await self._write("DELETE FROM tasks WHERE entryid = ?", (task_id,))

    async def delete_all_tasks(self) -> None:
        await self._write("DELETE FROM tasks")

    async def refresh_tasks(self) -> None:
        # 刷新逻辑由 TasksRepository 负责
        return None

    async def _update_completed(self, task_id: str, completed: bool) -> None:
        await self._write(
            "UPDATE tasks SET completed = ? WHERE entryid = ?",
            (int(completed), task_id),
        )

    async def _write(self, sql: str, params: tuple = ()) -> None:
        """执行单条写语句并提交，失败时回滚"""
        try:
            await self._conn.execute(sql, params)
            await self._conn.commit()
        except Exception:
            log.error("local_write_failed", sql=sql.split()[0])
            await self._conn.rollback()
            raise

    @staticmethod
    def _row_to_task(row) -> Task:
        """将数据库行转换为 Task 模型"""
        return Task(
            task_id=row[0],
            title=row[1],
            description=row[2],
            completed=bool(row[3]),
        )
