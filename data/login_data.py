"""login功能测试用例：测试数据、登录错误提示信息
测试正常登录流程
用户名错误
密码错误
用户名为空
密码为空
用户名和密码都为空
边界输入（特殊字符、大小写、空格、超长、unicode）
"""
import random

from config.pages import STANDARD_PASSWORD, STANDARD_USERNAME
from data.models import Credentials, EdgeCaseLogin, InvalidLoginCase

# 账号密码来自环境变量，未设置时为 None（登录时不填写对应输入框）
STANDARD_USER = Credentials(
    username=STANDARD_USERNAME,
    password=STANDARD_PASSWORD,
)

# 不依赖环境变量的登录成功账号
LITERAL_STANDARD_USER = Credentials(username="standard_user", password="secret_sauce")

# 除 locked_out_user 以外可登录的账号
VALID_USERNAMES = (
    "standard_user",
    "problem_user",
    "performance_glitch_user",
    "error_user",
    "visual_user",
)

ERROR_MESSAGES = {
    "invalid_credentials": "Epic sadface: Username and password do not match any user in this service",
    "username_required": "Epic sadface: Username is required",
    "password_required": "Epic sadface: Password is required",
    "locked_out": "Epic sadface: Sorry, this user has been locked out.",
    "first_name_required": "Error: First Name is required",
    "last_name_required": "Error: Last Name is required",
    "postal_code_required": "Error: Postal Code is required",
}

INVALID_CREDENTIALS = {
    "invalid_username": InvalidLoginCase(
        username="invalid_user",
        password=STANDARD_USER.password,
        expected_error="Username and password do not match"),
    "invalid_password": InvalidLoginCase(
        username=STANDARD_USER.username,
        password="wrong_password",
        expected_error="Username and password do not match"),
    "empty_username": InvalidLoginCase(
        username="",
        password=STANDARD_USER.password,
        expected_error="Username is required"),
    "empty_password": InvalidLoginCase(
        username=STANDARD_USER.username,
        password="",
        expected_error="Password is required"),
    "both_empty": InvalidLoginCase(
        username="",
        password="",
        expected_error="Username is required"),
}

EDGE_CASE_DATA = {
    "special_chars": EdgeCaseLogin("user@#$%^&*()", "secret_sauce", "Username with special characters"),
    "wrong_case": EdgeCaseLogin("STANDARD_USER", "secret_sauce", "Username in wrong case"),
    "with_spaces": EdgeCaseLogin(" standard_user ", "secret_sauce", "Username with leading/trailing spaces"),
    "very_long": EdgeCaseLogin("a" * 500, "secret_sauce", "Very long username (500 chars)"),
    "unicode": EdgeCaseLogin("user123你好", "secret_sauce", "Username with unicode characters"),
}

LOGIN_PAGE_TITLE = "Swag Labs"
LOGIN_SUCCESS_URL = "/inventory.html"


def get_random_valid_user(rng=random) -> Credentials:
    """随机返回一个可登录账号（密码使用环境变量中的密码）"""
    return Credentials(username=rng.choice(VALID_USERNAMES), password=STANDARD_USER.password)
