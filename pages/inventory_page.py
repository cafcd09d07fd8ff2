import random

import allure
from playwright.sync_api import Page

from config.locators import COMMON_LOCATORS, INVENTORY_LOCATORS
from config.pages import URLS, ENV
from data.models import Product
from pages.base_page import BasePage
from utils.common_utils import random_unique_indices, to_kebab_case


class InventoryPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        # 商品列表
        self.item_product = page.locator(INVENTORY_LOCATORS["item_product"])

        # 商品明细
        self.item_product_name = page.locator(INVENTORY_LOCATORS["item_product_name"])
        self.item_product_price = page.locator(INVENTORY_LOCATORS["item_product_price"])
        self.add_to_cart_button = page.locator(INVENTORY_LOCATORS["add_to_cart_button"])

        # 排序下拉框
        self.product_sort_type = page.locator(INVENTORY_LOCATORS["product_sort_type"])

        # 购物车
        self.shopping_cart_badge = page.locator(COMMON_LOCATORS["shopping_cart_badge"])
        self.shopping_cart_link = page.locator(COMMON_LOCATORS["shopping_cart_link"])

    # ================= 页面行为 =================
    @allure.step("Open inventory page")
    def open(self, url: str = URLS[ENV]["inventory"]):
        super().open(url)
        self.wait_visible(self.item_product.first)

    # 选择排序方式
    def sort_by(self, label: str):
        self.product_sort_type.select_option(label=label)

    def add_product_to_cart_by_index(self, index: int):
        """按商品名称拼接 data-test，点击对应商品的 Add to cart 按钮"""
        product_name = self.text(self.item_product_name.nth(index))
        selector = INVENTORY_LOCATORS["add_to_cart_by_name"].format(to_kebab_case(product_name))
        self.click(self.page.locator(selector))

    @allure.step("Add {count} random products to cart")
    def add_random_products_to_cart(self, count: int, rng=random) -> list[Product]:
        total = self.get_product_count()
        if count > total:
            raise ValueError(f"Cannot add {count} products. Only {total} products available.")

        added_products = []
        for index in random_unique_indices(total, count, rng):
            product = self.get_product_details(index)
            self.add_product_to_cart_by_index(index)
            added_products.append(product)
        return added_products

    @allure.step("Go to cart")
    def go_to_cart(self):
        self.click(self.shopping_cart_link)
        self.wait_url(r".*cart\.html")  # 读取购物车前先等待页面跳转

    # ================= 数据获取 =================
    def get_product_count(self) -> int:
        return self.get_count(self.item_product)

    def get_product_details(self, index: int) -> Product:
        return Product(
            name=self.text(self.item_product_name.nth(index)),
            price=self.text(self.item_product_price.nth(index)),
        )

    def get_product_names(self) -> list[str]:
        return self.get_texts(self.item_product_name)

    def get_product_prices(self) -> list[str]:
        return self.get_texts(self.item_product_price)

    def get_cart_count(self) -> int:
        # 购物车为空时角标不渲染
        if self.get_count(self.shopping_cart_badge) == 0:
            return 0
        return int(self.text(self.shopping_cart_badge))

    def is_cart_badge_visible(self) -> bool:
        return self.is_visible(self.shopping_cart_badge)
