import allure
from playwright.sync_api import Page

from config.locators import CHECKOUT_STEP_ONE_LOCATORS
from config.pages import URLS, ENV
from data.models import CheckoutInfo
from pages.base_page import BasePage


class CheckoutStepOnePage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        #  收货人信息
        self.first_name_input = page.locator(CHECKOUT_STEP_ONE_LOCATORS["firstName_input"])  # firstName输入框
        self.last_name_input = page.locator(CHECKOUT_STEP_ONE_LOCATORS["lastName_input"])  # lastName输入框
        self.postal_code_input = page.locator(CHECKOUT_STEP_ONE_LOCATORS["postalCode_input"])  # postalCode输入框
        self.error_message = page.locator(CHECKOUT_STEP_ONE_LOCATORS["error_msg"])  # 收货人未填写点击下一步错误提示文案
        self.cancel_button = page.locator(CHECKOUT_STEP_ONE_LOCATORS["cancel_button"])  # 取消按钮
        self.continue_button = page.locator(CHECKOUT_STEP_ONE_LOCATORS["continue_button"])  # 继续按钮

    # ========== 页面行为 ==========
    def open(self, url: str = URLS[ENV]["checkout_step_one"]):
        super().open(url)

    def wait_for_page_load(self):
        """从购物车点击 Checkout 后等待跳转"""
        self.wait_url(r".*checkout-step-one\.html")

    @allure.step("Fill checkout information")
    def fill_checkout_information(self, info: CheckoutInfo):
        self.fill(self.first_name_input, info.first_name)
        self.fill(self.last_name_input, info.last_name)
        self.fill(self.postal_code_input, info.postal_code)

    def click_continue(self):
        self.click(self.continue_button)

    def click_cancel(self):
        self.click(self.cancel_button)

    @allure.step("Complete checkout step one")
    def complete_checkout_step_one(self, info: CheckoutInfo):
        self.fill_checkout_information(info)
        self.click_continue()

    # ================= 数据获取 =================
    def get_error_message(self) -> str:
        return self.text(self.error_message)

    def is_error_message_displayed(self) -> bool:
        return self.is_visible(self.error_message)
