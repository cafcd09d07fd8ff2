COMMON_LOCATORS = {
    "page_title": ".title",  # 页面标题
    "shopping_cart_link": "[data-test='shopping-cart-link']",  # 购物车icon
    "shopping_cart_badge": "[data-test='shopping-cart-badge']",  # 购物车显示商品数量
}

LOGIN_LOCATORS = {
    "username_input": "[data-test='username']",  # 用户名
    "password_input": "[data-test='password']",  # 用户密码
    "login_button": "[data-test='login-button']",  # 登录按钮
    "error_msg": "[data-test='error']",  # 登录错误提示信息
    "error_close_button": "[data-test='error-button']",  # 错误提示关闭按钮
    "logo": ".login_logo",  # 登录页logo
}

INVENTORY_LOCATORS = {
    "item_product": "[data-test='inventory-item']",  # 商品列表
    "item_product_name": "[data-test='inventory-item-name']",  # 单商品名称
    "item_product_price": "[data-test='inventory-item-price']",  # 单商品价格
    "add_to_cart_button": "button[data-test^='add-to-cart']",  # 商品添加按钮
    "add_to_cart_by_name": "[data-test='add-to-cart-{}']",  # 指定商品添加按钮
    "product_sort_type": "[data-test='product-sort-container']",  # 商品排序方式
}

CART_LOCATORS = {
    "cart_item": ".cart_item",  # 购物车商品行
    "item_product_name": "[data-test='inventory-item-name']",  # 单商品名称
    "item_product_price": "[data-test='inventory-item-price']",  # 单商品价格
    "item_quantity": ".cart_quantity",  # 单商品数量
    "remove_button": "button[data-test^='remove']",  # 删除按钮
    "remove_by_name": "[data-test='remove-{}']",  # 指定商品删除按钮
    "continue": "[data-test='continue-shopping']",  # 继续购物按钮
    "checkout_button": "[data-test='checkout']",  # 结算按钮
}

CHECKOUT_STEP_ONE_LOCATORS = {
    "firstName_input": "[data-test='firstName']",  # firstName输入框
    "lastName_input": "[data-test='lastName']",  # lastName输入框
    "postalCode_input": "[data-test='postalCode']",  # postalCode输入框
    "error_msg": "[data-test='error']",  # 未填写收货人信息提交错误提示msg
    "cancel_button": "[data-test='cancel']",  # 取消按钮
    "continue_button": "[data-test='continue']",  # 继续按钮
}

CHECKOUT_STEP_TWO_LOCATORS = {
    "cart_item": ".cart_item",  # 订单确认页面商品列表
    "item_product_name": "[data-test='inventory-item-name']",  # 单商品名称
    "item_product_price": "[data-test='inventory-item-price']",  # 单商品价格
    "payment_information": "[data-test='payment-info-value']",  # 支付信息value
    "shipping_information": "[data-test='shipping-info-value']",  # 运费信息value
    "subtotal_label": "[data-test='subtotal-label']",  # 商品价格
    "tax_label": "[data-test='tax-label']",  # 税费
    "total_label": "[data-test='total-label']",  # 订单价格
    "cancel_button": "[data-test='cancel']",  # 取消按钮
    "finish_button": "[data-test='finish']",  # 完成按钮
}

CHECKOUT_COMPLETE_LOCATORS = {
    "complete_header": "[data-test='complete-header']",  # 完成页面提示信息
    "complete_text": "[data-test='complete-text']",  # 完成页面描述
    "pony_express_image": ".pony_express",  # 完成页面图片
    "back_home_button": "[data-test='back-to-products']",  # 返回商品列表按钮
}
