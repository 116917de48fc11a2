"""
报告生成器 - 运行摘要

把每个任务执行过的动作数量汇总成可读文本。
"""
from typing import Sequence

from .models import TaskReport


def report(reports: Sequence[TaskReport]) -> str:
    """
    生成运行摘要

    Args:
        reports: 按执行顺序排列的任务记录

    Returns:
        str: 每个任务一行，最后一行是总数
    """
    if not reports:
        return "⏳ 没有执行任何任务"

    lines = [
        f"✅ {r.task.description}: {len(r.results)} actions"
        for r in reports
    ]
    total = sum(len(r.results) for r in reports)
    lines.append(f"📝 {len(reports)} tasks, {total} actions")
    return "\n".join(lines)
