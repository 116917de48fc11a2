"""
任务运行器 - Interpret → Execute

按顺序执行所有任务：对每条指令先由解释器翻译成动作，再交给执行器。
所有任务共用同一个浏览器上下文和页面，任何异常都直接向上抛出。
"""
from typing import Iterable, List

from loguru import logger
from playwright.async_api import Page

from .browser_manager import BrowserManager
from .executor import DEFAULT_PREVIEW_CHARS, perform_action
from .interpreter import get_next_action
from .models import Task, TaskReport


class TaskRunner:
    """
    任务运行器

    使用方式：
        runner = TaskRunner(BrowserManager(headless=True))
        reports = await runner.run(TASKS)
    """

    def __init__(
        self,
        browser_manager: BrowserManager,
        preview_chars: int = DEFAULT_PREVIEW_CHARS,
    ) -> None:
        self.browser_manager = browser_manager
        self.preview_chars = preview_chars

    async def run(self, tasks: Iterable[Task]) -> List[TaskReport]:
        """
        依次运行全部任务

        Args:
            tasks: 要执行的任务

        Returns:
            List[TaskReport]: 每个任务的执行记录
        """
        context = await self.browser_manager.new_context()
        try:
            page = await context.new_page()
            return [await self.run_task(task, page) for task in tasks]
        finally:
            try:
                await context.close()
            except Exception as e:
                logger.debug(f"⚙️ [TaskRunner] 关闭上下文出错: {e}")

    async def run_task(self, task: Task, page: Page) -> TaskReport:
        """
        在给定页面上执行单个任务的全部步骤

        Args:
            task: 要执行的任务
            page: 共享的页面

        Returns:
            TaskReport: 任务执行记录
        """
        logger.info(f"=== Starting task: {task.description} ===")
        task_report = TaskReport(task=task)

        for i, step in enumerate(task.steps):
            logger.debug(f"⚙️ [TaskRunner] Step[{i}]: '{step}'")
            action = await get_next_action(step, page)
            result = await perform_action(action, page, self.preview_chars)
            task_report.results.append(result)

        logger.info(f"=== Completed task: {task.description} ===")
        return task_report
