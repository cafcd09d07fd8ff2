import json
import shutil
from pathlib import Path

import allure
import pytest
from playwright.sync_api import sync_playwright

from config.pages import BASE_URL, HEADLESS, LOGIN_STATE_FILE
from data.checkout_data import CHECKOUT_INFO
from data.login_data import STANDARD_USER
from pages.page_manager import PageManager
from scripts.save_login_state import has_login_state, save_login_state
from utils.retry_utils import build_retry_insight, record_attempt

ARTIFACT_DIRS = ["artifacts", "videos", "tracing"]


def artifact_dir(item, attempt: int) -> Path:
    """artifacts/<module>/<class>/<test>/attempt_N"""
    module = item.module.__name__.split(".")[-1]
    cls = item.cls.__name__ if item.cls else "no_class"
    return Path("artifacts") / module / cls / item.name / f"attempt_{attempt}"


# ================== Session Fixtures ==================
@pytest.fixture(scope="session")
def playwright_instance():
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(playwright_instance):
    """浏览器只启动一次"""
    browser = playwright_instance.chromium.launch(headless=HEADLESS)
    yield browser
    browser.close()


@pytest.fixture(scope="session", autouse=True)
def clean_artifacts():
    """测试session启动前，清空artifacts、videos、tracing（storage 登录态保留复用）"""
    for path in ARTIFACT_DIRS:
        p = Path(path)
        if p.exists():
            shutil.rmtree(p)
        p.mkdir()


@pytest.fixture(scope="session")
def login_state(browser) -> Path:
    """
     确保 login.json 存在且有效，只在 need_login 用例第一次使用时生成
    """
    if has_login_state(LOGIN_STATE_FILE):
        print(f"✅ {LOGIN_STATE_FILE}已存在且有效，跳过生成")
    else:
        print(f"🔐 {LOGIN_STATE_FILE}不存在或无效，重新生成")
        save_login_state(LOGIN_STATE_FILE, STANDARD_USER, browser)
    return LOGIN_STATE_FILE


@pytest.fixture(scope="session")
def checkout_info():
    return CHECKOUT_INFO["valid"]


# ================== Function Fixtures ==================
@pytest.fixture(scope="function")
def context(browser, request):
    """
    每个测试方法一个全新 context
    - need_login 用例基于 login.json 复用登录态
    - 视频 + tracing 每个 attempt 单独目录，只保留失败用例的
    """
    attempt = getattr(request.node, "execution_count", 1)
    request.node._current_attempt = attempt
    request.node._failed = False  # rerun 时重置上一次 attempt 的失败标记

    attempt_name = f"attempt_{attempt}"
    record_video_dir = Path("videos") / request.node.name / attempt_name
    record_tracing_dir = Path("tracing") / request.node.name / attempt_name
    record_video_dir.mkdir(parents=True, exist_ok=True)
    record_tracing_dir.mkdir(parents=True, exist_ok=True)

    need_login = request.node.get_closest_marker("need_login") is not None
    storage_state = request.getfixturevalue("login_state") if need_login else None

    context = browser.new_context(
        base_url=BASE_URL,
        storage_state=storage_state,
        record_video_dir=str(record_video_dir),  # video文件只有在context.close()后才会真正落盘
        record_video_size={"width": 1280, "height": 720})
    context.tracing.start(name=attempt_name, screenshots=True, snapshots=True, sources=True)

    yield context

    #  ======== teardown阶段 ========
    trace_path = record_tracing_dir / "trace.zip"
    try:
        context.tracing.stop(path=trace_path)  # trace.zip 在这里真正生成
    finally:
        context.close()  # 一定要先close：释放video文件句柄、video真正写入磁盘

    failed = getattr(request.node, "_failed", False)
    if failed:
        collect_video_and_trace(request.node, attempt, record_video_dir, trace_path)
    shutil.rmtree(record_video_dir, ignore_errors=True)
    shutil.rmtree(record_tracing_dir, ignore_errors=True)

    attempts = getattr(request.node, "_attempts", [])
    max_attempts = getattr(request.node.config.option, "reruns", 0) + 1
    if len(attempts) > 1 and (not failed or attempt == max_attempts):
        attach_retry_insight(attempts)


@pytest.fixture(scope="function")
def page(context):
    """每个测试方法一个新 page"""
    page = context.new_page()
    console_errors = []

    # page.on("console")是浏览器级别监听,不会因为跳转丢失
    page.on(
        "console",
        lambda msg: console_errors.append({
            "type": msg.type,
            "text": msg.text,
            "location": str(msg.location)
        }) if msg.type == "error" else None
    )
    page._console_errors = console_errors  # 挂到page上，方便hook里取
    yield page
    page.close()


@pytest.fixture(scope="function")
def pm(page):
    """每个测试一个全新的 PageManager"""
    return PageManager(page)


# ================== Pytest Hook：失败处理 ==================
@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    测试失败时自动保存：
    - 截图
    - URL
    - Console errors
    """
    outcome = yield
    rep = outcome.get_result()

    if rep.when != "call":
        return

    page = item.funcargs.get("page")
    if not page:
        return

    attempt = record_attempt(item, rep, page.url)["attempt"]

    if not rep.failed:
        return

    # 标记失败（告诉 context fixture 保留 video、trace）
    item._failed = True

    base_dir = artifact_dir(item, attempt)
    base_dir.mkdir(parents=True, exist_ok=True)

    screenshot = base_dir / "failure.png"
    page.screenshot(path=screenshot, full_page=True)
    (base_dir / "url.txt").write_text(page.url, encoding="utf-8")
    console = base_dir / "console_errors.json"
    console.write_text(
        json.dumps(getattr(page, "_console_errors", []), indent=2, ensure_ascii=False), encoding="utf-8")

    allure.attach.file(screenshot, name="Failure-Screenshot", attachment_type=allure.attachment_type.PNG)
    allure.attach(page.url, name="Page-Url", attachment_type=allure.attachment_type.TEXT)
    allure.attach.file(console, name="Console-Errors", attachment_type=allure.attachment_type.JSON)


def collect_video_and_trace(item, attempt: int, record_video_dir: Path, trace_path: Path):
    """失败用例的 video、trace 移动到 artifacts 目录并 attach
    hook 触发早于 context teardown，video 和 trace 只能在这里处理
    """
    target_dir = artifact_dir(item, attempt)
    target_dir.mkdir(parents=True, exist_ok=True)

    for video_file in record_video_dir.glob("*.webm"):
        target = target_dir / video_file.name
        shutil.move(str(video_file), target)
        allure.attach.file(target, name="Video", attachment_type=allure.attachment_type.WEBM)

    if trace_path.exists():
        target = target_dir / "trace.zip"
        shutil.move(str(trace_path), target)
        allure.attach.file(target, name="Playwright-Trace.zip")


def attach_retry_insight(attempts: list[dict]):
    chain = " → ".join(
        f"Attempt {a['attempt']} {'❌' if a['status'] == 'FAILED' else '✔'}" for a in attempts)
    allure.attach(
        "\n".join([chain, *build_retry_insight(attempts)]),
        name="Retry Insight",
        attachment_type=allure.attachment_type.TEXT
    )


@pytest.fixture(scope="function")
def clean_cart(pm):
    """
    用例执行前清空购物车，最后停留在 inventory 页面
    - 以购物车页面实际商品数为准（角标可能不准）
    - 逐个删除第一行直到为空
    """
    pm.inventory_page.open()
    pm.inventory_page.go_to_cart()
    if pm.cart_page.get_cart_item_count() > 0:
        pm.cart_page.clear_cart()
    pm.inventory_page.open()
    return pm
