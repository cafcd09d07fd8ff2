import allure
from playwright.sync_api import Page

from config.locators import CHECKOUT_STEP_TWO_LOCATORS
from config.pages import URLS, ENV
from data.models import PriceSummary, Product
from pages.base_page import BasePage
from utils.common_utils import parse_money


class CheckoutStepTwoPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        #  商品信息
        self.cart_items = page.locator(CHECKOUT_STEP_TWO_LOCATORS["cart_item"])
        self.cart_item_names = page.locator(CHECKOUT_STEP_TWO_LOCATORS["item_product_name"])
        self.cart_item_prices = page.locator(CHECKOUT_STEP_TWO_LOCATORS["item_product_price"])
        # 订单价格
        self.payment_information = page.locator(CHECKOUT_STEP_TWO_LOCATORS["payment_information"])  # 支付信息value
        self.shipping_information = page.locator(CHECKOUT_STEP_TWO_LOCATORS["shipping_information"])  # 运费信息value
        self.subtotal_label = page.locator(CHECKOUT_STEP_TWO_LOCATORS["subtotal_label"])  # 商品总价格
        self.tax_label = page.locator(CHECKOUT_STEP_TWO_LOCATORS["tax_label"])  # 税费
        self.total_label = page.locator(CHECKOUT_STEP_TWO_LOCATORS["total_label"])  # 订单价格
        # 操作步骤
        self.cancel_button = page.locator(CHECKOUT_STEP_TWO_LOCATORS["cancel_button"])  # 取消按钮
        self.finish_button = page.locator(CHECKOUT_STEP_TWO_LOCATORS["finish_button"])  # 完成按钮

    # ========== 页面行为 ==========
    def open(self, url: str = URLS[ENV]["checkout_step_two"]):
        super().open(url)

    @allure.step("Finish order")
    def click_finish(self):
        self.click(self.finish_button)

    def click_cancel(self):
        self.click(self.cancel_button)

    def complete_checkout(self):
        self.click_finish()

    def wait_for_checkout_complete(self):
        self.wait_url(r".*checkout-complete\.html")

    # ================= 数据获取 =================
    def get_item_count(self) -> int:
        return self.get_count(self.cart_items)

    def get_all_item_names(self) -> list[str]:
        return self.cart_item_names.all_inner_texts()

    def get_all_item_prices(self) -> list[str]:
        return self.cart_item_prices.all_inner_texts()

    def get_all_order_items(self) -> list[Product]:
        return [
            Product(name=self.text(self.cart_item_names.nth(i)), price=self.text(self.cart_item_prices.nth(i)))
            for i in range(self.get_item_count())
        ]

    def get_payment_information(self) -> str:
        return self.text(self.payment_information)

    def get_shipping_information(self) -> str:
        return self.text(self.shipping_information)

    def get_subtotal(self) -> float:
        # 'Item total: $29.99'
        return parse_money(self.text(self.subtotal_label))

    def get_tax(self) -> float:
        # 'Tax: $2.40'
        return parse_money(self.text(self.tax_label))

    def get_total(self) -> float:
        # 'Total: $32.39'
        return parse_money(self.text(self.total_label))

    def get_price_summary(self) -> PriceSummary:
        return PriceSummary(subtotal=self.get_subtotal(), tax=self.get_tax(), total=self.get_total())

    # ================= 手动计算 =================
    def is_price_calculation_correct(self) -> bool:
        """subtotal + tax == total（保留两位小数比较）"""
        summary = self.get_price_summary()
        return round(summary.subtotal + summary.tax, 2) == round(summary.total, 2)

    def are_items_in_order(self, expected_items: list[str]) -> bool:
        names = self.get_all_item_names()
        return all(item in names for item in expected_items)

    def is_finish_button_enabled(self) -> bool:
        return self.is_enabled(self.finish_button)
