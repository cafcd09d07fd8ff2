from playwright.sync_api import Page

from pages.cart_page import CartPage
from pages.checkout_complete_page import CheckoutCompletePage
from pages.checkout_step_one_page import CheckoutStepOnePage
from pages.checkout_step_two_page import CheckoutStepTwoPage
from pages.inventory_page import InventoryPage
from pages.login_page import LoginPage


class PageManager:
    """所有 Page Object 的统一入口，绑定同一个 page
        pm = PageManager(page)
        pm.login_page.login("standard_user", "secret_sauce")
        pm.inventory_page.add_random_products_to_cart(3)
    """

    def __init__(self, page: Page):
        self.page = page
        self.login_page = LoginPage(page)
        self.inventory_page = InventoryPage(page)
        self.cart_page = CartPage(page)
        self.checkout_step_one_page = CheckoutStepOnePage(page)
        self.checkout_step_two_page = CheckoutStepTwoPage(page)
        self.checkout_complete_page = CheckoutCompletePage(page)
