PRODUCT_COUNT = 6  # 商品列表商品数量

INVENTORY_PAGE_TITLE = "Products"
CART_PAGE_TITLE = "Your Cart"

# 排序下拉框选项 label
PRODUCT_SORT = {
    "name_asc": "Name (A to Z)",
    "name_desc": "Name (Z to A)",
    "price_asc": "Price (low to high)",
    "price_desc": "Price (high to low)",
}

RANDOM_PRODUCT_COUNTS = [1, 3, 6]  # 随机加购数量（<= PRODUCT_COUNT）
