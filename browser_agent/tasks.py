"""
内置任务列表

每条指令都需要符合解释器支持的格式：navigate / click / type / press / extract。
"""
from typing import Optional

from .models import Task

TASKS = (
    Task(
        description="Search for “BrowserOS open‑source browser agent” and extract some page text",
        steps=(
            "navigate https://duckduckgo.com",
            # DuckDuckGo 首页的搜索框是 name="q" 的 input
            "type input[name=q] BrowserOS open-source browser agent",
            # 回车触发导航，Playwright 会自动等待页面加载
            "press Enter",
            "extract body",
        ),
    ),
)


def get_task(description: str) -> Optional[Task]:
    """按描述查找内置任务（不区分大小写），找不到时返回 None"""
    wanted = description.strip().lower()
    for task in TASKS:
        if task.description.lower() == wanted:
            return task
    return None
