import logging
import time
from abc import ABC, abstractmethod
from typing import Callable, Optional
from common.constants import DEFAULT_POLL_INTERVAL_MS, DEFAULT_TIMEOUT_MS
from enums.control_kind import ControlKind

logger = logging.getLogger(__name__)


class Element(ABC):
    """
    Element is the handle contract of the automation engine: a reference to
    exactly one located UI element and the simple actions it supports.
    """

    @abstractmethod
    def set_value(self, value):
        ...

    @abstractmethod
    def click(self):
        ...

    @abstractmethod
    def select_option(self, value):
        ...

    @abstractmethod
    def get_value(self):
        ...

    @abstractmethod
    def matches(self, selector: str, text: Optional[str] = None) -> bool:
        ...

    @abstractmethod
    def find(self, locator: str) -> "Element":
        ...

    @abstractmethod
    def control_kind(self) -> ControlKind:
        ...

    @property
    @abstractmethod
    def text(self) -> str:
        ...

    @abstractmethod
    def is_visible(self) -> bool:
        ...


class Driver(ABC):
    """
    Driver is the automation capability a page object talks to:
    - Navigation and the current location.
    - Element lookup by selector or label.
    - Simple element actions, forwarded to the handle.
    - Bounded polling (wait_until / wait_until_not) with the session timeout.

    Timeout and poll interval are session configuration given at construction.
    Page objects read them, they never change them.
    """

    def __init__(self, timeout: int = DEFAULT_TIMEOUT_MS,
                 poll_interval: int = DEFAULT_POLL_INTERVAL_MS):
        self.timeout = timeout
        self.poll_interval = poll_interval

    @abstractmethod
    def navigate(self, url: str):
        ...

    @abstractmethod
    def current_location(self) -> str:
        ...

    # Absolute form of a page url, as navigate() would load it
    def resolve_url(self, url: str) -> str:
        return url

    @abstractmethod
    def find_element(self, locator: str) -> Element:
        ...

    @abstractmethod
    def is_present(self, selector: str, text: Optional[str] = None) -> bool:
        ...

    def set_value(self, handle: Element, value):
        return handle.set_value(value)

    def select_option(self, handle: Element, value):
        return handle.select_option(value)

    def click(self, handle: Element):
        return handle.click()

    def control_kind(self, handle: Element) -> ControlKind:
        return handle.control_kind()

    # Current time in milliseconds, only differences are meaningful
    def now(self) -> float:
        return time.monotonic() * 1000.0

    def sleep(self, milliseconds: float):
        time.sleep(milliseconds / 1000.0)

    def wait_until(self, predicate: Callable[[], bool], timeout: Optional[int] = None) -> bool:
        """
        Polls predicate until it holds or the wait window elapses.
        Returns True on the first positive poll, False after the full window.
        """
        timeout = self.timeout if timeout is None else timeout
        deadline = self.now() + timeout

        while True:
            if predicate():
                return True
            if self.now() >= deadline:
                logger.debug("Condition not met within %s ms", timeout)
                return False
            self.sleep(self.poll_interval)

    def wait_until_not(self, predicate: Callable[[], bool], timeout: Optional[int] = None) -> bool:
        """
        Watches predicate for the whole wait window.
        Returns False on the first poll where it holds, True once the window
        elapsed without it ever holding.
        """
        timeout = self.timeout if timeout is None else timeout
        deadline = self.now() + timeout

        while True:
            if predicate():
                logger.debug("Condition appeared while confirming its absence")
                return False
            if self.now() >= deadline:
                return True
            self.sleep(self.poll_interval)


def driver_of(owner) -> Driver:
    """Returns the driver of a page object (or section), or owner itself when it is a Driver."""
    if isinstance(owner, Driver):
        return owner
    driver = getattr(owner, "driver", None)
    if not isinstance(driver, Driver):
        raise TypeError(f"{owner!r} is neither a Driver nor an object owning one")
    return driver
