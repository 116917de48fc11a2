"""
Action / Task / Result 数据模型

定义浏览器代理的核心数据结构，包括：
- ActionType：动作类型枚举
- Action：单个浏览器动作
- Task：任务描述 + 有序指令列表
- ActionResult：动作执行结果
- TaskReport：单个任务的执行记录
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class ActionType(str, Enum):
    """动作类型"""
    NAVIGATE = "navigate"
    CLICK = "click"
    TYPE = "type"
    PRESS = "press"
    EXTRACT = "extract"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Action:
    """
    单个浏览器动作

    Attributes:
        type: 动作类型
        url: navigate 的目标地址
        selector: CSS 选择器（click / type / extract）
        text: type 要输入的文本
        key: press 要按下的按键
    """
    type: ActionType
    url: Optional[str] = None
    selector: Optional[str] = None
    text: Optional[str] = None
    key: Optional[str] = None


@dataclass(frozen=True)
class Task:
    """
    任务描述

    Attributes:
        description: 简短的任务说明
        steps: 按顺序执行的指令字符串
    """
    description: str
    steps: Tuple[str, ...] = ()


@dataclass
class ActionResult:
    """
    动作执行结果

    Attributes:
        action: 已执行的动作
        message: 结果描述
        data: 额外数据（extract 的完整文本放在 data["text"]）
    """
    action: Action
    message: str
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass
class TaskReport:
    """单个任务的执行记录"""
    task: Task
    results: List[ActionResult] = field(default_factory=list)
