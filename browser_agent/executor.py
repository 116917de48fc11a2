"""
动作执行器 - 基于 Playwright 的页面操作

将 Action 转换为对 Playwright Page 的调用。缺少必需字段时在调用页面前
同步抛出 ActionError；unknown 动作只记录警告，不做任何操作。
"""
from loguru import logger
from playwright.async_api import Page

from .errors import ActionError
from .models import Action, ActionResult, ActionType

DEFAULT_EXTRACT_SELECTOR = "body"
DEFAULT_PREVIEW_CHARS = 500


async def perform_action(
    action: Action,
    page: Page,
    preview_chars: int = DEFAULT_PREVIEW_CHARS,
) -> ActionResult:
    """
    在页面上执行单个动作

    Args:
        action: 要执行的动作
        page: Playwright 页面
        preview_chars: extract 结果在日志中展示的最大字符数

    Returns:
        ActionResult: 执行结果，extract 的完整文本在 data["text"]

    Raises:
        ActionError: 动作缺少必需字段
    """
    if action.type == ActionType.NAVIGATE:
        if not action.url:
            raise ActionError("navigate action requires a url")
        logger.info(f"→ navigating to {action.url}")
        await page.goto(action.url)
        return ActionResult(action=action, message=f"navigated to {action.url}")

    if action.type == ActionType.CLICK:
        if not action.selector:
            raise ActionError("click action requires a selector")
        logger.info(f"→ clicking {action.selector}")
        await page.click(action.selector)
        return ActionResult(action=action, message=f"clicked {action.selector}")

    if action.type == ActionType.TYPE:
        if not action.selector or action.text is None:
            raise ActionError("type action requires a selector and text")
        logger.info(f'→ typing "{action.text}" into {action.selector}')
        await page.fill(action.selector, action.text)
        return ActionResult(action=action, message=f"typed into {action.selector}")

    if action.type == ActionType.PRESS:
        if not action.key:
            raise ActionError("press action requires a key")
        logger.info(f"→ pressing {action.key}")
        await page.keyboard.press(action.key)
        return ActionResult(action=action, message=f"pressed {action.key}")

    if action.type == ActionType.EXTRACT:
        return await _extract(action, page, preview_chars)

    logger.warning(f"⚠️ [Executor] Unknown action type: {action}")
    return ActionResult(action=action, message="skipped unknown action")


async def _extract(action: Action, page: Page, preview_chars: int) -> ActionResult:
    """提取选择器对应元素的文本，日志只输出前 preview_chars 个字符"""
    selector = action.selector or DEFAULT_EXTRACT_SELECTOR
    logger.info(f"→ extracting text from {selector}")
    text = await page.text_content(selector)

    preview = text[:preview_chars] if text is not None else None
    logger.info(f"Extracted text (truncated to {preview_chars} characters):\n{preview}")

    return ActionResult(
        action=action,
        message=f"extracted {len(text or '')} characters from {selector}",
        data={"selector": selector, "text": text},
    )
