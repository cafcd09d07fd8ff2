from playwright.sync_api import Page

from config.locators import CHECKOUT_COMPLETE_LOCATORS
from config.pages import URLS, ENV
from pages.base_page import BasePage


class CheckoutCompletePage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.complete_header = page.locator(CHECKOUT_COMPLETE_LOCATORS["complete_header"])  # Thank you for your order!
        self.complete_text = page.locator(CHECKOUT_COMPLETE_LOCATORS["complete_text"])
        self.pony_express_image = page.locator(CHECKOUT_COMPLETE_LOCATORS["pony_express_image"])
        self.back_home_button = page.locator(CHECKOUT_COMPLETE_LOCATORS["back_home_button"])  # Back Home按钮

    def open(self, url: str = URLS[ENV]["checkout_complete"]):
        super().open(url)

    def click_back_home(self):
        self.click(self.back_home_button)

    def go_back_to_inventory(self):
        self.click_back_home()

    def wait_for_inventory_page(self):
        self.wait_url(r".*inventory\.html")

    def get_complete_header(self) -> str:
        return self.text(self.complete_header)

    def get_complete_text(self) -> str:
        return self.text(self.complete_text)

    def is_pony_express_image_visible(self) -> bool:
        return self.is_visible(self.pony_express_image)

    def is_back_home_button_enabled(self) -> bool:
        return self.is_enabled(self.back_home_button)

    def is_checkout_successful(self) -> bool:
        """完成页面的标题、描述、图片、返回按钮全部可见"""
        return all(self.is_visible(locator) for locator in (
            self.complete_header,
            self.complete_text,
            self.pony_express_image,
            self.back_home_button,
        ))
