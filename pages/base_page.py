import re

from playwright.sync_api import Locator, Page, expect

from config.locators import COMMON_LOCATORS
from config.pages import NAVIGATION_TIMEOUT


class BasePage:

    def __init__(self, page: Page):
        self.page = page
        self.page_title = page.locator(COMMON_LOCATORS["page_title"])  # 页面标题

    # ========= 基础动作 =========
    def open(self, url: str):
        self.page.goto(url)

    def click(self, locator: Locator):
        locator.scroll_into_view_if_needed()
        locator.click()

    def fill(self, locator: Locator, value: str):
        locator.fill(value)

    def text(self, locator: Locator) -> str:
        return locator.inner_text()

    def get_texts(self, locator: Locator) -> list[str]:
        return [locator.nth(i).inner_text() for i in range(locator.count())]

    def get_count(self, locator: Locator) -> int:
        return locator.count()

    # ========= 状态探测（元素不存在不抛异常） =========
    def is_visible(self, locator: Locator) -> bool:
        return locator.is_visible()

    def is_enabled(self, locator: Locator) -> bool:
        return locator.is_enabled()

    # ========= 等待 =========
    def wait_visible(self, locator: Locator):
        expect(locator).to_be_visible()  # 严格模式：locator 需唯一，多个元素时传 .first

    def wait_url(self, pattern: str, timeout: float = NAVIGATION_TIMEOUT):
        self.page.wait_for_url(re.compile(pattern), timeout=timeout)

    # ========= 页面信息 =========
    def get_current_url(self) -> str:
        return self.page.url

    def get_page_title(self) -> str:
        return self.text(self.page_title)
