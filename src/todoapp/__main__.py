"""CLI 入口模块 -- python -m todoapp <command>

支持的命令：
  list [all|active|completed] [--refresh]  列出任务
  add <title> [description]                新建任务
  show <task_id>                           查看任务
  edit <task_id> <title> [description]     编辑任务
  complete <task_id>                       标记完成
  activate <task_id>                       标记活跃
  delete <task_id>                         删除任务
  clear-completed                          删除所有已完成任务
  stats [--refresh]                        统计

内存远端在每次运行时以本地库内容初始化（本地为空时使用示例数据），
因此 --refresh 不会丢失此前保存的任务。
"""

import asyncio
import sys

from .config import TITLE_PREVIEW_LENGTH, get_db_path, get_remote_latency_ms
from .exceptions import TodoAppError
from .logging_config import bind_command_context, setup_logging
from .models import Task, TasksFilterType
from .services import TaskService
from .store import DEFAULT_SEED_TASKS, StoreGroup, create_store_group

_USAGE = __doc__.split("\n", 2)[2]

# 命令 -> 最少位置参数个数
_COMMANDS: dict[str, int] = {
    "list": 0,
    "add": 1,
    "show": 1,
    "edit": 2,
    "complete": 1,
    "activate": 1,
    "delete": 1,
    "clear-completed": 0,
    "stats": 0,
}

_REFRESH_FLAG = "--refresh"


def main(argv: list[str] | None = None) -> int:
    """CLI 主入口"""
    args = sys.argv[1:] if argv is None else argv
    if not args or args[0] not in _COMMANDS:
        if args:
            print(f"未知命令: {args[0]}")
        print("用法: python -m todoapp <command>")
        print(_USAGE)
        return 1

    command, rest = args[0], args[1:]
    refresh = _REFRESH_FLAG in rest
    positional = [a for a in rest if a != _REFRESH_FLAG]
    if len(positional) < _COMMANDS[command]:
        print(f"参数不足: {command}")
        print(_USAGE)
        return 1

    setup_logging()
    bind_command_context(command)
    try:
        return asyncio.run(run_command(command, positional, refresh=refresh))
    except TodoAppError as e:
        print(f"错误: {e}")
        return 1


def _format_task(task: Task) -> str:
    mark = "x" if task.is_completed else " "
    title = (task.title_for_list or "")[:TITLE_PREVIEW_LENGTH]
    return f"[{mark}] {task.task_id}  {title}"


async def _seed_remote(store_group: StoreGroup) -> None:
    """用本地库内容初始化内存远端

    此前每次写操作都同时写入远端，本地库即为远端上次的状态。
    本地为空时使用示例数据。
    """
    local_tasks = await store_group.local.get_tasks()
    store_group.remote.add_tasks(*(local_tasks or DEFAULT_SEED_TASKS))


async def run_command(command: str, args: list[str], refresh: bool = False) -> int:
    """执行单条命令"""
    store_group = await create_store_group(
        get_db_path(),
        remote_latency_ms=get_remote_latency_ms(),
    )
    service = TaskService(store_group.repository)

    try:
        await _seed_remote(store_group)

        if command == "list":
            try:
                filter_type = TasksFilterType(args[0]) if args else TasksFilterType.ALL_TASKS
            except ValueError:
                print(f"未知筛选类型: {args[0]}")
                return 1
            tasks = await service.load_tasks(filter_type, force_update=refresh)
            if tasks is None:
                print("任务数据不可用")
                return 1
            if not tasks:
                print("没有任务")
            for task in tasks:
                print(_format_task(task))
            return 0

        if command == "stats":
            stats = await service.get_statistics(force_update=refresh)
            if stats is None:
                print("任务数据不可用")
                return 1
            print(f"活跃任务: {stats.active_count} ({stats.active_percent:.1f}%)")
            print(f"已完成任务: {stats.completed_count} ({stats.completed_percent:.1f}%)")
            return 0

        if command == "add":
            task = await service.create_task(args[0], args[1] if len(args) > 1 else None)
            print(f"已创建: {task.task_id}")
            return 0

        if command == "show":
            task = await service.get_task(args[0])
            print(_format_task(task))
            if task.description:
                print(task.description)
            return 0

        if command == "edit":
            task = await service.update_task(
                args[0], args[1], args[2] if len(args) > 2 else None
            )
            print(f"已更新: {task.task_id}")
            return 0

        # 按 id 完成/激活需要任务已在缓存中，先加载一次
        await service.load_tasks()
        if command == "complete":
            await service.complete_task(args[0])
        elif command == "activate":
            await service.activate_task(args[0])
        elif command == "delete":
            await service.delete_task(args[0])
        elif command == "clear-completed":
            await service.clear_completed_tasks()
        print("完成")
        return 0
    finally:
        await store_group.close()


if __name__ == "__main__":
    sys.exit(main())
