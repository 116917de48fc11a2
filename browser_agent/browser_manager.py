"""
浏览器生命周期管理 - Playwright Chromium 实例

负责 Chromium 的启动、上下文创建和关闭，headless 由配置决定。
"""
import asyncio
from typing import Optional, Sequence

from loguru import logger
from playwright.async_api import Browser, BrowserContext, Playwright, async_playwright


class BrowserManager:
    """
    Playwright 浏览器管理器

    首次需要时才启动浏览器，之后复用同一个实例。
    """

    def __init__(
        self,
        headless: bool = True,
        viewport_width: int = 1280,
        viewport_height: int = 720,
        launch_args: Sequence[str] = ("--no-sandbox", "--disable-dev-shm-usage"),
    ) -> None:
        self.headless = headless
        self.viewport = {"width": viewport_width, "height": viewport_height}
        self.launch_args = list(launch_args)
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._lock = asyncio.Lock()

    async def get_browser(self) -> Browser:
        """
        获取或创建浏览器实例

        Returns:
            Browser: Playwright 浏览器实例
        """
        async with self._lock:
            if self._browser is None or not self._browser.is_connected():
                logger.info(f"🌐 [BrowserManager] 启动 Chromium 浏览器 (headless={self.headless})")
                if self._playwright is None:
                    self._playwright = await async_playwright().start()
                self._browser = await self._playwright.chromium.launch(
                    headless=self.headless,
                    args=self.launch_args,
                )
            return self._browser

    async def new_context(self) -> BrowserContext:
        """
        创建新的浏览器上下文（独立的 cookie / 存储）

        Returns:
            BrowserContext: 浏览器上下文
        """
        browser = await self.get_browser()
        return await browser.new_context(viewport=self.viewport)

    async def close(self) -> None:
        """关闭浏览器和 Playwright 实例，可重复调用"""
        async with self._lock:
            if self._browser:
                try:
                    await self._browser.close()
                except Exception as e:
                    logger.debug(f"🌐 [BrowserManager] 关闭浏览器出错: {e}")
                self._browser = None
            if self._playwright:
                try:
                    await self._playwright.stop()
                except Exception as e:
                    logger.debug(f"🌐 [BrowserManager] 停止 Playwright 出错: {e}")
                self._playwright = None
                logger.info("🌐 [BrowserManager] 浏览器已关闭")
