class PageObjectError(Exception):
    """Base class for every error raised by the page object runtime."""


class NavigationMismatchError(PageObjectError):
    """
    Raised by PageObject.visit() when the browser did not arrive on a location
    matching the page url matcher before the wait window elapsed.
    """

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected location matching '{expected}', but was on '{actual}'")


# Name used by page objects written against the original Page API
WrongPageError = NavigationMismatchError


class UnknownFieldError(PageObjectError, KeyError):

    def __init__(self, name: str, known=()):
        self.name = name
        self.known = tuple(known)
        super().__init__(f"Unknown field '{name}', declared fields: {', '.join(self.known) or '-'}")

    def __str__(self):
        return self.args[0]


class FieldSetError(PageObjectError):
    """Invalid field catalog passed to FieldSet."""


class InvalidFieldNameError(FieldSetError):
    pass


class DuplicateAccessorError(FieldSetError):

    def __init__(self, accessor_name: str, names):
        self.accessor_name = accessor_name
        self.names = tuple(names)
        super().__init__(
            f"Fields {', '.join(repr(n) for n in self.names)} "
            f"all map to accessor '{accessor_name}'")


class ElementLookupError(PageObjectError):
    """A locator resolved to zero elements (or to more than one, see subclass)."""

    def __init__(self, locator: str, count: int = 0):
        self.locator = locator
        self.count = count
        super().__init__(f"Locator '{locator}' matched {count} elements, expected exactly 1")


class AmbiguousElementError(ElementLookupError):
    pass


class StaleElementError(PageObjectError):
    """The element a handle was bound to has been removed from the page since its lookup."""

    def __init__(self, locator: str):
        self.locator = locator
        super().__init__(f"Element '{locator}' is no longer attached to the page")
