import re
import time
from pathlib import Path
import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright
from drivers.playwright_driver import PlaywrightDriver
from utils.config_utils import get_effective_config_value, load_config, to_bool


ROOT_DIR = Path(__file__).parent
REPORT_DIR = Path.cwd() / "reports"
REPORT_FILE = REPORT_DIR / "report.html"


# ---------------------------------------------------------------------------
# Load configuration
# ---------------------------------------------------------------------------
CONFIG = load_config(ROOT_DIR / "config.json")


# ---------------------------------------------------------------------------
# CLI options
# ---------------------------------------------------------------------------
def pytest_addoption(parser):
    parser.addoption(
        "--app_url",
        action="store",
        help="Override base_url from config.json",
    )

    parser.addoption(
        "--browser_type",
        action="store",
        choices=["chromium", "firefox", "webkit"],
        help="Browser used by end-to-end tests",
    )

    parser.addoption(
        "--headless",
        action="store",
        choices=["true", "false"],
        help="Run the browser headless",
    )

    parser.addoption(
        "--wait_timeout",
        action="store",
        type=int,
        help="Wait window (in ms) for lookups, arrival checks and presence predicates",
    )

    parser.addoption(
        "--screenshot_on_error",
        action="store",
        default="true",
        help="Capture screenshot on test failure",
    )


# ---------------------------------------------------------------------------
# Config fixture
# ---------------------------------------------------------------------------
@pytest.fixture(scope="session")
def config(pytestconfig):
    cfg = CONFIG.copy()

    base_url = pytestconfig.getoption("app_url") or get_effective_config_value("base_url", cfg)
    if base_url:
        cfg["base_url"] = base_url

    browser_type = pytestconfig.getoption("browser_type")
    if browser_type:
        cfg["browser"] = browser_type

    headless = pytestconfig.getoption("headless")
    if headless is not None:
        cfg["headless"] = to_bool(headless)
    else:
        cfg["headless"] = to_bool(cfg.get("headless", True))

    timeout = pytestconfig.getoption("wait_timeout")
    if timeout is not None:
        cfg["timeout"] = timeout
    else:
        cfg["timeout"] = int(cfg.get("timeout", 5000))

    return cfg


# ---------------------------------------------------------------------------
# Playwright fixtures
# ---------------------------------------------------------------------------
@pytest.fixture(scope="session")
def playwright_instance():
    """Provide a shared Playwright instance."""
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(playwright_instance, config):
    """Launch a browser based on config."""
    browser_name = config.get("browser", "chromium")
    headless = config.get("headless", True)
    try:
        browser = getattr(playwright_instance, browser_name).launch(headless=headless)
    except PlaywrightError as e:
        pytest.skip(f"Cannot launch {browser_name}: {e}")
    yield browser
    browser.close()


@pytest.fixture(scope="function")
def context(browser, config):
    """New browser context per test."""
    context = browser.new_context()
    context.set_default_timeout(config.get("timeout", 5000))
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context, config):
    """New page per test."""
    page = context.new_page()
    page.set_default_timeout(config.get("timeout", 5000))
    yield page
    page.close()


@pytest.fixture(scope="function")
def driver(page, config):
    """Driver for page objects, configured from config.json and the command line."""
    return PlaywrightDriver.from_config(page, config)


def pytest_configure(config):
    """Make sure reports/ exists and direct pytest-html there."""
    REPORT_DIR.mkdir(parents=True, exist_ok=True)
    config.option.htmlpath = str(REPORT_FILE)


def safe_filename(name: str) -> str:
    """
    Convert any string (like test names or parameterized values)
    into a filesystem-safe filename.
    Keeps letters, digits, underscore, dash, and dot only.
    """
    # Replace all invalid filename chars with '_'
    name = re.sub(r'[<>:"/\\|?*\s,=#@!%^&;{}()+\[\]]+', '_', name)
    # Collapse consecutive underscores
    name = re.sub(r'_+', '_', name)
    # Trim leading/trailing underscores or dots
    name = name.strip('._')
    return name[:150]  # limit length to avoid OS path length issues


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture a Playwright screenshot and attach it to the HTML report."""
    outcome = yield
    rep = outcome.get_result()

    # Run only when the test itself failed
    if rep.when != "call" or not rep.failed:
        return

    opt_value = item.config.getoption("screenshot_on_error") or "true"
    if not to_bool(opt_value):
        return

    from playwright.sync_api import Page

    page = item.funcargs.get("page", None)
    if not page or not isinstance(page, Page):
        return

    from datetime import datetime

    # Build unique name: {test-name}-yyyy-MM-dd-hh-mm-ss-sss.png
    ts = datetime.now().strftime("%Y-%m-%d-%H-%M-%S-%f")[:-3]
    screenshot_path = REPORT_DIR / f"{safe_filename(item.name)}-{ts}.png"

    try:
        # Give browser time to render any failure overlay
        time.sleep(0.2)
        page.screenshot(path=str(screenshot_path), full_page=True)
    except PlaywrightError as e:
        print(f"[WARN] Screenshot capture failed: {e}")
        return

    print(f"[INFO] Screenshot saved → {screenshot_path}")

    # Attach to pytest-html report
    if item.config.pluginmanager.hasplugin("html"):
        from pytest_html import extras

        rel_path = screenshot_path.name
        link_html = f'<a href="{rel_path}" target="_blank">Open Screenshot</a>'
        rep.extras = getattr(rep, "extras", [])
        rep.extras.append(extras.html(link_html))
        rep.extras.append(extras.image(rel_path))
