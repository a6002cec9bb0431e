import logging
from typing import Optional
from drivers.driver import Element, driver_of
from enums.control_kind import ControlKind

logger = logging.getLogger(__name__)


class ElementAdapter:
    """
    ElementAdapter wraps one located element and lets subclasses add domain
    actions on top of it:
    - The element is looked up exactly once, at construction.
    - Every Element operation is forwarded unchanged to the wrapped handle.
    - Any other attribute is proxied to the handle as well, so the adapter
      can be used wherever the raw handle is expected.

    If the underlying element is replaced or removed later, the adapter is
    stale; the next forwarded operation fails with the driver's error.
    """

    def __init__(self, owner, locator: str):
        self.driver = driver_of(owner)
        self.owner = owner
        self.locator = str(locator)
        self._element = self.driver.find_element(self.locator)
        logger.debug("Bound %s to '%s'", self.__class__.__name__, self.locator)

    @property
    def element(self) -> Element:
        return self._element

    def set_value(self, value):
        return self._element.set_value(value)

    def click(self):
        return self._element.click()

    def select_option(self, value):
        return self._element.select_option(value)

    def get_value(self):
        return self._element.get_value()

    def matches(self, selector: str, text: Optional[str] = None) -> bool:
        return self._element.matches(selector, text)

    def find(self, locator: str) -> Element:
        return self._element.find(locator)

    def control_kind(self) -> ControlKind:
        return self._element.control_kind()

    @property
    def text(self) -> str:
        return self._element.text

    def is_visible(self) -> bool:
        return self._element.is_visible()

    def __getattr__(self, item):
        # Only reached for names the adapter itself does not define
        element = self.__dict__.get("_element")
        if element is None:
            raise AttributeError(item)
        return getattr(element, item)

    def __str__(self):
        return f"<{self.__class__.__name__} locator='{self.locator}'>"

    __repr__ = __str__
