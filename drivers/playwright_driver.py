import logging
from typing import Optional
from urllib.parse import urljoin
from playwright.sync_api import ElementHandle, Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from common.constants import DEFAULT_POLL_INTERVAL_MS, DEFAULT_TIMEOUT_MS, LABEL_PREFIX
from common.exceptions import AmbiguousElementError, ElementLookupError, StaleElementError
from drivers.driver import Driver, Element
from enums.control_kind import ControlKind
from utils.text_utils import contains_text

logger = logging.getLogger(__name__)

CHECKABLE_TYPES = ("checkbox", "radio")

_INPUT_TYPE_JS = "el => (el.getAttribute('type') || '').toLowerCase()"
_TAG_NAME_JS = "el => el.tagName.toLowerCase()"
_IS_MULTIPLE_JS = "el => el.multiple === true"
_SELECTED_VALUES_JS = "el => Array.from(el.selectedOptions, o => o.value)"
_OPTION_VALUE_JS = """(el, wanted) => {
    const option = Array.from(el.options).find(
        o => o.value === wanted || o.label === wanted || o.text.trim() === wanted);
    return option ? option.value : null;
}"""
_MATCHES_JS = "(el, selector) => el.matches(selector)"
_IS_CONNECTED_JS = "el => el.isConnected"


def resolve_locator(root, locator: str) -> Locator:
    """
    Turns a locator string into a Playwright Locator under root (a Page or a Locator).
    'label=Email' resolves by exact label text, anything else is a selector.
    """
    if locator.startswith(LABEL_PREFIX):
        return root.get_by_label(locator[len(LABEL_PREFIX):], exact=True)
    return root.locator(locator)


class PlaywrightElement(Element):
    """
    PlaywrightElement is bound to the DOM node found at lookup time.
    Actions go to that node's ElementHandle. Once the node leaves the page
    every operation raises StaleElementError, even when a new node now
    matches the same locator. Anything outside the Element contract
    (hover, press, screenshot, ...) is proxied to the handle unchanged.
    """

    def __init__(self, locator: Locator, handle: ElementHandle,
                 driver: "PlaywrightDriver", description: str):
        self._locator = locator
        self._handle = handle
        self._driver = driver
        self.description = description

    @property
    def locator(self) -> Locator:
        return self._locator

    @property
    def handle(self) -> ElementHandle:
        return self._bound()

    def _bound(self) -> ElementHandle:
        if not self._handle.evaluate(_IS_CONNECTED_JS):
            raise StaleElementError(self.description)
        return self._handle

    def _input_type(self) -> str:
        return self._bound().evaluate(_INPUT_TYPE_JS)

    def set_value(self, value):
        if self._input_type() in CHECKABLE_TYPES:
            self._handle.set_checked(bool(value))
        else:
            self._handle.fill("" if value is None else str(value))

    def click(self):
        self._bound().click()

    def select_option(self, value):
        value = str(value)
        handle = self._bound()

        if not handle.evaluate(_IS_MULTIPLE_JS):
            handle.select_option(value)
            return

        # Playwright replaces the whole selection, so keep what is already picked
        selected = handle.evaluate(_SELECTED_VALUES_JS)
        option_value = handle.evaluate(_OPTION_VALUE_JS, value)
        if option_value is None:
            raise ElementLookupError(f"{self.description} >> option={value}")
        if option_value not in selected:
            selected.append(option_value)
        handle.select_option(selected)

    def get_value(self):
        if self._input_type() in CHECKABLE_TYPES:
            return self._handle.is_checked()
        if self.control_kind() is ControlKind.CHOICE and self._handle.evaluate(_IS_MULTIPLE_JS):
            return self._handle.evaluate(_SELECTED_VALUES_JS)
        return self._handle.input_value()

    def matches(self, selector: str, text: Optional[str] = None) -> bool:
        handle = self._bound()
        if not handle.evaluate(_MATCHES_JS, selector):
            return False
        return text is None or contains_text(handle.inner_text(), text)

    def find(self, locator: str) -> "PlaywrightElement":
        # Children are searched only while this element is still on the page
        self._bound()
        return self._driver.lookup(
            self._locator, locator, f"{self.description} >> {locator}")

    def control_kind(self) -> ControlKind:
        if self._bound().evaluate(_TAG_NAME_JS) == "select":
            return ControlKind.CHOICE
        return ControlKind.SCALAR

    @property
    def text(self) -> str:
        return self._bound().inner_text()

    def is_visible(self) -> bool:
        return self._bound().is_visible()

    def __getattr__(self, item):
        if item.startswith("_"):
            raise AttributeError(item)
        return getattr(self._bound(), item)

    def __str__(self):
        return f"<PlaywrightElement locator='{self.description}'>"

    __repr__ = __str__


class PlaywrightDriver(Driver):
    """
    Driver backed by a Playwright sync Page.
    Relative urls given to navigate() are joined onto base_url.
    """

    def __init__(self, page: Page, timeout: int = DEFAULT_TIMEOUT_MS,
                 poll_interval: int = DEFAULT_POLL_INTERVAL_MS, base_url: Optional[str] = None):
        super().__init__(timeout, poll_interval)
        self.page = page
        self.base_url = base_url

    @classmethod
    def from_config(cls, page: Page, config: dict) -> "PlaywrightDriver":
        return cls(page,
                   timeout=int(config.get("timeout", DEFAULT_TIMEOUT_MS)),
                   poll_interval=int(config.get("poll_interval", DEFAULT_POLL_INTERVAL_MS)),
                   base_url=config.get("base_url"))

    def resolve_url(self, url: str) -> str:
        if self.base_url:
            return urljoin(self.base_url, url)
        return url

    def navigate(self, url: str):
        url = self.resolve_url(url)
        logger.info("Navigate to: %s", url)
        self.page.goto(url)

    def current_location(self) -> str:
        return self.page.url

    def find_element(self, locator: str) -> PlaywrightElement:
        return self.lookup(self.page, locator, locator)

    def lookup(self, root, locator: str, description: str) -> PlaywrightElement:
        """
        Resolves locator under root, waiting for it to attach, requires a unique
        match and binds the result to the node found now.
        """
        target = resolve_locator(root, locator)
        logger.debug("Find element: %s", description)

        try:
            target.first.wait_for(state="attached", timeout=self.timeout)
        except PlaywrightTimeoutError as e:
            raise ElementLookupError(description, 0) from e

        count = target.count()
        if count > 1:
            raise AmbiguousElementError(description, count)

        try:
            handle = target.element_handle(timeout=self.timeout)
        except PlaywrightTimeoutError as e:
            raise ElementLookupError(description, 0) from e
        return PlaywrightElement(target, handle, self, description)

    def is_present(self, selector: str, text: Optional[str] = None) -> bool:
        target = self.page.locator(selector)
        if text is not None:
            target = target.filter(has_text=text)
        return target.count() > 0

    def sleep(self, milliseconds: float):
        self.page.wait_for_timeout(milliseconds)

    def __str__(self):
        return f"<PlaywrightDriver base_url='{self.base_url}' timeout={self.timeout}>"

    __repr__ = __str__
