"""
Browser Task Agent - 指令驱动的浏览器任务演示
==============================================

依次执行内置任务：每条指令由占位解释器翻译成动作，再通过 Playwright 执行。

使用方法:
  python main.py                                  # 运行全部内置任务
  python main.py --list                           # 列出内置任务
  python main.py --task "<description>"           # 只运行指定任务
  python main.py --step "navigate https://x.com" --step "extract h1"
  HEADLESS=false python main.py                   # 显示浏览器窗口
"""
import argparse
import asyncio
import sys
from typing import List, Optional, Sequence

from loguru import logger

from browser_agent import TASKS, BrowserManager, Task, TaskRunner, get_task
from browser_agent.reporter import report
from config import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function}:{line} - {message}"


def setup_logging(level: str, log_file: Optional[str] = None) -> None:
    """
    配置 loguru：控制台 + 可选的按天轮转日志文件

    Raises:
        ValueError: 日志级别不存在（此时原有 sink 保持不变）
    """
    logger.level(level)
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)
    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            level=level,
            format=FILE_FORMAT,
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browser Task Agent - 指令驱动的浏览器任务演示")
    parser.add_argument("--list", action="store_true", help="列出所有内置任务")
    parser.add_argument("--task", type=str, help="只运行指定描述的内置任务")
    parser.add_argument(
        "--step",
        action="append",
        default=[],
        metavar="INSTRUCTION",
        help="临时指令，可重复；指定后不再运行内置任务",
    )
    parser.add_argument("--headed", action="store_true", help="显示浏览器窗口（覆盖 HEADLESS）")
    parser.add_argument("--log-level", type=str, default=None, help="日志级别，默认读取配置")
    return parser


def select_tasks(args: argparse.Namespace) -> List[Task]:
    """
    根据命令行参数选出要运行的任务

    Raises:
        ValueError: --task 指定的任务不存在
    """
    if args.step:
        return [Task(description="Ad-hoc instructions", steps=tuple(args.step))]
    if args.task:
        task = get_task(args.task)
        if task is None:
            raise ValueError(f"unknown task: {args.task}")
        return [task]
    return list(TASKS)


def list_tasks() -> None:
    """打印内置任务列表"""
    print("\n📋 内置任务列表:\n")
    for task in TASKS:
        print(f"• {task.description}")
        for step in task.steps:
            print(f"    - {step}")
    print()


async def run(tasks: Sequence[Task], headless: bool) -> None:
    """启动浏览器运行任务，结束后总是关闭浏览器"""
    browser_manager = BrowserManager(
        headless=headless,
        viewport_width=settings.viewport_width,
        viewport_height=settings.viewport_height,
    )
    runner = TaskRunner(browser_manager, preview_chars=settings.extract_preview_chars)
    try:
        reports = await runner.run(tasks)
    finally:
        await browser_manager.close()
    logger.info(f"\n{report(reports)}")


async def main(argv: Optional[Sequence[str]] = None) -> int:
    """主入口，返回进程退出码"""
    args = build_parser().parse_args(argv)
    try:
        setup_logging(args.log_level or settings.log_level, settings.log_file)
    except Exception as e:
        # 日志 sink 可能已被移除，直接写 stderr
        print(f"Agent encountered an error: {e}", file=sys.stderr)
        return 1

    if args.list:
        list_tasks()
        return 0

    headless = False if args.headed else settings.headless

    try:
        tasks = select_tasks(args)
        await run(tasks, headless)
    except Exception as e:
        logger.exception(f"Agent encountered an error: {e}")
        return 1
    return 0


def cli() -> None:
    """console script 入口"""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
