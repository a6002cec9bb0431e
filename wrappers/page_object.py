import logging
import re
from typing import Optional, Pattern, Union
from urllib.parse import urlsplit
from common.constants import FLASH_ERROR_SELECTOR
from common.exceptions import NavigationMismatchError
from drivers.driver import Driver, Element
from drivers.playwright_driver import PlaywrightDriver
from wrappers.element_adapter import ElementAdapter

logger = logging.getLogger(__name__)


def url_pattern_for(url: str) -> Pattern:
    """
    Builds the default arrival pattern for url: the same path on any host,
    tolerating a trailing slash, a query string and a fragment.
    A relative path (no leading slash) matches as a whole trailing path segment.
    """
    path = urlsplit(url).path
    if path.startswith("/"):
        prefix = r"^(?:[a-zA-Z][a-zA-Z0-9+.-]*://[^/]+)?"
    else:
        prefix = r"(?:^|/)"
    return re.compile(prefix + re.escape(path.rstrip("/")) + r"/?(?:[?#].*)?$")


class PageObject:
    """
    PageObject binds a url to navigation plus arrival verification and carries
    the affordances every page of the application shares (flash errors).

    Subclasses declare `url` (and optionally `url_matcher`) as class attributes
    and compose their sections from FieldSet and ElementAdapter instances.
    The page keeps no DOM state: every query goes to the live driver.
    """

    url: Optional[str] = None
    url_matcher: Union[str, Pattern, None] = None
    flash_error_selector = FLASH_ERROR_SELECTOR
    # Per-page wait window in milliseconds, None uses the driver timeout
    wait_timeout: Optional[int] = None

    def __init__(self, driver, config: Optional[dict] = None,
                 url: Optional[str] = None, url_matcher: Union[str, Pattern, None] = None):
        self.config = config or {}
        if not isinstance(driver, Driver):
            # Raw Playwright page
            driver = PlaywrightDriver.from_config(driver, self.config)
        self.driver = driver

        if url is not None:
            self.url = url
        if url_matcher is not None:
            self.url_matcher = url_matcher

    @property
    def matcher(self) -> Pattern:
        if self.url_matcher is None:
            if self.url is None:
                raise ValueError(f"{self.__class__.__name__} declares neither url nor url_matcher")
            return url_pattern_for(self.driver.resolve_url(self.url))
        if isinstance(self.url_matcher, str):
            return re.compile(self.url_matcher)
        return self.url_matcher

    def visit(self, verify_arrival: bool = True):
        if self.url is None:
            raise ValueError(f"{self.__class__.__name__} has no url to visit")

        self.driver.navigate(self.url)

        if verify_arrival:
            self.verify_arrival()
        return self

    def verify_arrival(self):
        """
        Waits until the current location matches this page.
        Raises NavigationMismatchError carrying the pattern and the actual
        location when the wait window elapses first.
        """
        matcher = self.matcher
        arrived = self.driver.wait_until(
            lambda: matcher.search(self.driver.current_location()) is not None,
            self.wait_timeout)

        if not arrived:
            actual = self.driver.current_location()
            logger.warning("%s: expected '%s', landed on '%s'",
                           self.__class__.__name__, matcher.pattern, actual)
            raise NavigationMismatchError(matcher.pattern, actual)
        return self

    def current_url(self) -> str:
        return self.driver.current_location()

    # Snapshot check, no waiting
    def is_current(self) -> bool:
        return self.matcher.search(self.driver.current_location()) is not None

    def has_flash_error(self, text: Optional[str] = None) -> bool:
        """True as soon as a flash error (with text, if given) shows up, False after the full wait."""
        return self.driver.wait_until(
            lambda: self.driver.is_present(self.flash_error_selector, text),
            self.wait_timeout)

    def has_no_flash_error(self, text: Optional[str] = None) -> bool:
        """False as soon as a flash error (with text, if given) shows up, True once the full wait confirmed it stayed away."""
        return self.driver.wait_until_not(
            lambda: self.driver.is_present(self.flash_error_selector, text),
            self.wait_timeout)

    def find(self, locator: str) -> Element:
        return self.driver.find_element(locator)

    def element(self, locator: str, adapter_cls=None):
        return (adapter_cls or ElementAdapter)(self, locator)

    def __str__(self):
        return f"<{self.__class__.__name__} url='{self.url}'>"

    __repr__ = __str__
