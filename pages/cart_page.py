import allure
from playwright.sync_api import Page

from config.locators import CART_LOCATORS, COMMON_LOCATORS
from config.pages import URLS, ENV
from data.models import CartItem
from pages.base_page import BasePage
from utils.common_utils import parse_money, to_kebab_case


class CartPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.cart_items = page.locator(CART_LOCATORS["cart_item"])  # 购物车商品行
        self.cart_item_names = page.locator(CART_LOCATORS["item_product_name"])  # 单商品名称
        self.cart_item_prices = page.locator(CART_LOCATORS["item_product_price"])  # 单商品价格
        self.cart_item_quantities = page.locator(CART_LOCATORS["item_quantity"])  # 单商品数量
        self.remove_buttons = page.locator(CART_LOCATORS["remove_button"])  # remove商品按钮
        self.continue_shopping_button = page.locator(CART_LOCATORS["continue"])  # continue-shopping按钮
        self.checkout_button = page.locator(CART_LOCATORS["checkout_button"])  # 结算按钮
        self.shopping_cart_badge = page.locator(COMMON_LOCATORS["shopping_cart_badge"])  # 购物车角标

    # ================= 页面行为 =================
    @allure.step("Open cart page")
    def open(self, url: str = URLS[ENV]["cart"]):
        super().open(url)

    def remove_item_by_index(self, index: int):
        self.click(self.remove_buttons.nth(index))

    def remove_item_by_name(self, product_name: str):
        selector = CART_LOCATORS["remove_by_name"].format(to_kebab_case(product_name))
        self.click(self.page.locator(selector))

    @allure.step("Continue shopping")
    def continue_shopping(self):
        self.click(self.continue_shopping_button)

    @allure.step("Proceed to checkout")
    def proceed_to_checkout(self):
        self.click(self.checkout_button)

    @allure.step("Clear cart")
    def clear_cart(self):
        """每次删除第一行，直到页面上没有商品"""
        while self.get_cart_item_count() > 0:
            self.remove_item_by_index(0)

    # ================= 数据获取 =================
    def get_cart_item_count(self) -> int:
        return self.get_count(self.cart_items)

    def get_all_item_names(self) -> list[str]:
        return self.cart_item_names.all_inner_texts()

    def get_all_item_prices(self) -> list[str]:
        return self.cart_item_prices.all_inner_texts()

    def get_all_item_quantities(self) -> list[int]:
        return [int(q) for q in self.cart_item_quantities.all_inner_texts()]

    def get_item_details(self, index: int) -> CartItem:
        return CartItem(
            name=self.text(self.cart_item_names.nth(index)),
            price=self.text(self.cart_item_prices.nth(index)),
            quantity=int(self.text(self.cart_item_quantities.nth(index))),
        )

    def get_all_cart_items(self) -> list[CartItem]:
        """ 保存购物车页面商品信息list"""
        return [self.get_item_details(i) for i in range(self.get_cart_item_count())]

    def get_cart_badge_count(self) -> int:
        if self.get_count(self.shopping_cart_badge) == 0:
            return 0
        return int(self.text(self.shopping_cart_badge))

    def calculate_total_price(self) -> float:
        return sum(parse_money(price) for price in self.get_all_item_prices())

    def is_item_in_cart(self, product_name: str) -> bool:
        return product_name in self.get_all_item_names()

    def are_items_in_cart(self, product_names: list[str]) -> bool:
        names = self.get_all_item_names()
        return all(name in names for name in product_names)

    def is_cart_empty(self) -> bool:
        return self.get_cart_item_count() == 0

    def is_checkout_button_enabled(self) -> bool:
        return self.is_enabled(self.checkout_button)
