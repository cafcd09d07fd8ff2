class LoginAssert:

    @staticmethod
    def error_message(actual_msg: str, expect_msg: str):
        assert expect_msg in actual_msg, f"登录错误期望提示信息：{expect_msg}，登录错误实际提示信息：{actual_msg}"

    @staticmethod
    def redirected_to(current_url: str, path: str):
        assert path in current_url, f"登录后未跳转到{path}，当前URL：{current_url}"

    @staticmethod
    def stays_on_login_page(current_url: str, base_url: str):
        assert current_url.startswith(base_url), f"当前URL不在{base_url}域名下：{current_url}"
        assert "inventory.html" not in current_url, f"登录失败却跳转到了inventory页面：{current_url}"
