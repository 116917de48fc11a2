"""
指令解释器 - 自然语言指令 → 结构化动作

占位版"语言模型"：不调用任何 LLM，只对指令做空白分词并按首个单词分派。
支持的指令格式：

- ``navigate <url>``            打开指定 URL
- ``click <selector>``          点击 CSS 选择器（选择器可以包含空格）
- ``type <selector> <text>``    向输入框填入文本
- ``press <key>``               按下键盘按键（如 Enter）
- ``extract [<selector>]``      提取页面文本（默认 body，由执行器补全）

无法识别的指令返回 unknown 动作，由执行器记录警告后跳过。
"""
from typing import List, Optional

from loguru import logger
from playwright.async_api import Page

from .models import Action, ActionType


async def get_next_action(instruction: str, page: Optional[Page] = None) -> Action:
    """
    将一条指令翻译成下一步要执行的动作

    接收 page 参数是为了与真实模型的接口保持一致，占位实现不会读取页面。

    Args:
        instruction: 自然语言指令
        page: 当前页面（未使用）

    Returns:
        Action: 解析出的动作
    """
    action = parse_instruction(instruction)
    logger.debug(f"🔍 [Interpreter] '{instruction}' -> {action}")
    return action


def parse_instruction(instruction: str) -> Action:
    """
    解析单条指令

    只有命令单词不区分大小写，参数原样保留。

    Args:
        instruction: 指令字符串

    Returns:
        Action: 解析出的动作，无法识别时 type 为 UNKNOWN
    """
    tokens = instruction.split()
    if not tokens:
        return Action(type=ActionType.UNKNOWN)

    command = tokens[0].lower()
    args = tokens[1:]

    if command == ActionType.NAVIGATE.value:
        return Action(type=ActionType.NAVIGATE, url=_arg(args, 0))

    if command == ActionType.CLICK.value:
        return Action(type=ActionType.CLICK, selector=" ".join(args))

    if command == ActionType.TYPE.value:
        # 第一个参数是选择器，其余部分都是要输入的文本
        return Action(
            type=ActionType.TYPE,
            selector=_arg(args, 0),
            text=" ".join(args[1:]),
        )

    if command == ActionType.PRESS.value:
        return Action(type=ActionType.PRESS, key=_arg(args, 0))

    if command == ActionType.EXTRACT.value:
        return Action(type=ActionType.EXTRACT, selector=_arg(args, 0))

    return Action(type=ActionType.UNKNOWN)


def _arg(args: List[str], index: int) -> Optional[str]:
    """取第 index 个参数，不存在时返回 None"""
    return args[index] if index < len(args) else None
