"""todoapp -- 带缓存的任务仓库（本地 SQLite + 远端服务）"""

__version__ = "0.1.0"
