from pathlib import Path
from typing import Optional

from playwright.sync_api import Browser, sync_playwright

from config.pages import HEADLESS, LOGIN_STATE_FILE
from data.login_data import STANDARD_USER
from pages.login_page import LoginPage


def save_login_state(state_file: Path = LOGIN_STATE_FILE, credentials=STANDARD_USER,
                     browser: Optional[Browser] = None):
    """生成登录态（cookies + localStorage）
        - pytest 中传入 session 级 browser，在临时 context 里登录（sync_playwright 不能嵌套）
        - 单独执行该脚本命令：python -m scripts.save_login_state
    """
    if browser is None:
        with sync_playwright() as p:
            browser = p.chromium.launch(headless=HEADLESS)
            try:
                login_and_store(browser, state_file, credentials)
            finally:
                browser.close()
    else:
        login_and_store(browser, state_file, credentials)

    # 再次校验文件
    if not state_file.exists() or state_file.stat().st_size == 0:
        raise RuntimeError(f"‼️ {state_file}生成失败，请检查浏览器或账号")
    print(f"✅ 登录态已生成 -> {state_file}")


def login_and_store(browser: Browser, state_file: Path, credentials):
    context = browser.new_context()
    try:
        page = context.new_page()

        # 使用 Page Object 登录
        login_page = LoginPage(page)
        login_page.open()
        login_page.login(credentials.username, credentials.password)
        login_page.wait_for_inventory_page()

        state_file.parent.mkdir(parents=True, exist_ok=True)  # 确保storage目录一直存在
        context.storage_state(path=state_file)
    finally:
        context.close()


def has_login_state(state_file: Path = LOGIN_STATE_FILE) -> bool:
    return state_file.exists() and state_file.stat().st_size > 0


if __name__ == "__main__":
    save_login_state()
