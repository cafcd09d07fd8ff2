"""运行环境、页面URL配置
环境变量在导入时读取一次（.env 文件通过 python-dotenv 加载，不覆盖已有变量）
"""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

ENV = os.getenv("TEST_ENV", "prod")

# 账号密码，未设置时为 None
STANDARD_USERNAME = os.getenv("STANDARD_USERNAME")
STANDARD_PASSWORD = os.getenv("STANDARD_PASSWORD")

BASE_URLS = {
    "prod": "https://www.saucedemo.com",
}

PATHS = {
    "login": "/",
    "inventory": "/inventory.html",
    "cart": "/cart.html",
    "checkout_step_one": "/checkout-step-one.html",
    "checkout_step_two": "/checkout-step-two.html",
    "checkout_complete": "/checkout-complete.html",
}

BASE_URL = os.getenv("BASE_URL", BASE_URLS.get(ENV, BASE_URLS["prod"])).rstrip("/")

URLS = {
    ENV: {name: BASE_URL + path for name, path in PATHS.items()},
}

NAVIGATION_TIMEOUT = 10_000  # wait_for_url 超时时间(ms)

HEADLESS = os.getenv("HEADLESS", "true").lower() != "false" or bool(os.getenv("CI"))

LOGIN_STATE_FILE = Path(os.getenv("LOGIN_STATE_FILE", "storage/login.json"))
