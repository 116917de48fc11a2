"""
浏览器任务代理 - 指令驱动的 Playwright 演示

核心流程：静态任务列表 → 指令解释器 → 动作执行器
对每个任务的每条指令：翻译成动作，再在共享页面上执行。
"""
from .browser_manager import BrowserManager
from .engine import TaskRunner
from .errors import ActionError
from .executor import perform_action
from .interpreter import get_next_action, parse_instruction
from .models import Action, ActionResult, ActionType, Task, TaskReport
from .tasks import TASKS, get_task

__all__ = [
    "BrowserManager",
    "TaskRunner",
    "ActionError",
    "perform_action",
    "get_next_action",
    "parse_instruction",
    "Action",
    "ActionResult",
    "ActionType",
    "Task",
    "TaskReport",
    "TASKS",
    "get_task",
]
