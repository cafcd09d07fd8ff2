class CartAssert:

    @staticmethod
    def cart_badge_count(actual: int, expect: int):
        """购物车图标显示数字"""
        assert actual == expect, f"购物车角标显示的加购商品数量错误：{actual}!={expect}"

    @staticmethod
    def cart_item_count(actual: int, expect: int):
        assert actual == expect, f"购物车页面商品数量不符合预期：{actual}!={expect}"

    @staticmethod
    def products_in_cart(added_names: list[str], cart_names: list[str]):
        """加购商品与购物车页商品一致性对比"""
        for name in added_names:
            assert name in cart_names, f"inventory加购的商品{name}，在购物车页面不存在"

        for name in cart_names:
            assert name in added_names, f"购物车页面的商品{name}，不在inventory加购商品列表中"
