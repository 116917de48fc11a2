"""
Test configuration
"""
import os
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add project root to path
root_path = Path(__file__).parent.parent
sys.path.insert(0, str(root_path))

# Set minimal environment variables for testing
os.environ.setdefault("HEADLESS", "true")


@pytest.fixture
def page():
    """模拟的 Playwright Page"""
    page = MagicMock()
    page.goto = AsyncMock()
    page.click = AsyncMock()
    page.fill = AsyncMock()
    page.keyboard.press = AsyncMock()
    page.text_content = AsyncMock(return_value="hello world")
    return page


@pytest.fixture
def browser_manager(page):
    """模拟的 BrowserManager，new_context 返回的上下文会产出同一个 page"""
    context = MagicMock()
    context.new_page = AsyncMock(return_value=page)
    context.close = AsyncMock()

    manager = MagicMock()
    manager.new_context = AsyncMock(return_value=context)
    manager.close = AsyncMock()
    manager.context = context
    return manager
