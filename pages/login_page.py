from typing import Optional

import allure
from playwright.sync_api import Page

from config.locators import LOGIN_LOCATORS
from config.pages import URLS, ENV
from pages.base_page import BasePage


class LoginPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.username_input = page.locator(LOGIN_LOCATORS["username_input"])  # 用户名输入框
        self.password_input = page.locator(LOGIN_LOCATORS["password_input"])  # 密码输入框
        self.login_button = page.locator(LOGIN_LOCATORS["login_button"])  # 登录按钮
        self.error_message = page.locator(LOGIN_LOCATORS["error_msg"])  # 登录校验错误提示信息
        self.error_close_button = page.locator(LOGIN_LOCATORS["error_close_button"])  # 错误提示关闭按钮
        self.logo = page.locator(LOGIN_LOCATORS["logo"])  # 登录页logo

    # ================= 页面行为 =================
    @allure.step("Open login page")
    def open(self, url: str = URLS[ENV]["login"]):
        super().open(url)
        self.wait_visible(self.username_input)

    @allure.step("Login as '{username}'")
    def login(self, username: Optional[str], password: Optional[str]):
        """None 表示未配置的账号/密码，对应输入框保持不填写"""
        if username is not None:
            self.fill_username(username)
        if password is not None:
            self.fill_password(password)
        self.click_login_button()

    def fill_username(self, username: str):
        self.fill(self.username_input, username)

    def fill_password(self, password: str):
        self.fill(self.password_input, password)

    def click_login_button(self):
        self.click(self.login_button)

    def clear_input_fields(self):
        self.username_input.clear()
        self.password_input.clear()

    def dismiss_error_message(self):
        self.click(self.error_close_button)

    def wait_for_inventory_page(self):
        self.wait_url(r".*inventory\.html")

    # ================= 数据获取 =================
    def get_page_header_title(self) -> str:
        """登录成功后inventory页面标题"""
        self.page_title.wait_for(state="visible")
        return self.text(self.page_title)

    def get_error_message(self) -> str:
        return self.text(self.error_message)

    def get_page_title(self) -> str:
        """浏览器标签页标题（登录页固定为 Swag Labs）"""
        return self.page.title()

    def is_error_message_displayed(self) -> bool:
        return self.is_visible(self.error_message)

    def is_login_button_enabled(self) -> bool:
        return self.is_enabled(self.login_button)

    def is_logo_visible(self) -> bool:
        return self.is_visible(self.logo)
