import random

from data.models import CheckoutInfo

CHECKOUT_INFO = {
    "valid": CheckoutInfo(first_name="John", last_name="Doe", postal_code="12345"),
    "valid_alternative": CheckoutInfo(first_name="Jane", last_name="Smith", postal_code="90210"),
}

FIRST_NAMES = ("John", "Jane", "Bob", "Alice", "Charlie", "Diana")
LAST_NAMES = ("Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia")
POSTAL_CODES = ("12345", "90210", "10001", "60601", "94102", "02101")

ADD_PRODUCT_NUM = 3  # checkout 流程加购商品数量

STEP_ONE_PAGE_TITLE = "Checkout: Your Information"
STEP_TWO_PAGE_TITLE = "Checkout: Overview"
COMPLETE_PAGE_TITLE = "Checkout: Complete!"
FINISH_PAGE_MESSAGE = "Thank you for your order"

# 收货人信息缺失 -> 预期错误提示
MISSING_FIELD_CASES = {
    "empty_first_name": (CheckoutInfo("", "Doe", "12345"), "First Name is required"),
    "empty_last_name": (CheckoutInfo("John", "", "12345"), "Last Name is required"),
    "empty_postal_code": (CheckoutInfo("John", "Doe", ""), "Postal Code is required"),
}


def generate_random_checkout_info(rng=random) -> CheckoutInfo:
    """从固定列表中随机生成收货人信息"""
    return CheckoutInfo(
        first_name=rng.choice(FIRST_NAMES),
        last_name=rng.choice(LAST_NAMES),
        postal_code=rng.choice(POSTAL_CODES),
    )
