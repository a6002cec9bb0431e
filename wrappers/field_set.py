import logging
from types import MappingProxyType
from typing import Callable, Mapping
from common.constants import FIELD_ACCESSOR_SUFFIX
from common.exceptions import DuplicateAccessorError, InvalidFieldNameError, UnknownFieldError
from drivers.driver import Element, driver_of
from enums.control_kind import ControlKind
from utils.text_utils import as_value_list, to_accessor_name

logger = logging.getLogger(__name__)


class FieldSet:
    """
    FieldSet declares the inputs of a form once and exposes them by name.

    Example:
        form = FieldSet(page, {"email": "#email", "country": "label=Country"})
        form.email_field().set_value("a@b.c")
        form.fill_in({"email": "a@b.c", "country": "Norway"})

    The catalog is fixed at construction: one accessor per field named
    `<name>_field` is built there and never changes afterwards. Accessors look
    the element up again on every call, nothing is cached between calls.
    """

    def __init__(self, owner, fields: Mapping[str, str], suffix: str = FIELD_ACCESSOR_SUFFIX):
        self.driver = driver_of(owner)
        self.owner = owner
        self._fields = MappingProxyType(dict(fields))
        self._suffix = suffix
        self._accessors = {}
        self._accessor_owners = {}

        for name, locator in self._fields.items():
            if not isinstance(name, str) or not name.strip():
                raise InvalidFieldNameError(f"Field name must be a non-empty string, got {name!r}")
            if not isinstance(locator, str) or not locator:
                raise InvalidFieldNameError(f"Field '{name}' needs a locator string, got {locator!r}")

            accessor_name = to_accessor_name(name, suffix)
            if not accessor_name.isidentifier():
                raise InvalidFieldNameError(f"Field '{name}' does not yield a usable accessor name")
            if accessor_name in self._accessors:
                raise DuplicateAccessorError(accessor_name, [self._accessor_owners[accessor_name], name])
            if hasattr(type(self), accessor_name):
                raise DuplicateAccessorError(accessor_name, [name])

            self._accessors[accessor_name] = self._make_accessor(name, accessor_name)
            self._accessor_owners[accessor_name] = name

    def _make_accessor(self, name: str, accessor_name: str) -> Callable[[], Element]:
        def accessor():
            return self.field(name)
        accessor.__name__ = accessor_name
        return accessor

    @property
    def fields(self) -> Mapping[str, str]:
        return self._fields

    @property
    def accessor_names(self) -> tuple:
        return tuple(self._accessors)

    def accessor(self, name: str) -> Callable[[], Element]:
        if name not in self._fields:
            raise UnknownFieldError(name, self._fields)
        return self._accessors[to_accessor_name(name, self._suffix)]

    def field(self, name: str) -> Element:
        """Looks the field's element up afresh and returns it."""
        if name not in self._fields:
            raise UnknownFieldError(name, self._fields)
        return self.driver.find_element(self._fields[name])

    def fill_in(self, values: Mapping):
        """
        Fills the given fields in order.

        Scalar controls get the value assigned, choice controls get every
        entry of the value selected (a single value counts as one entry).
        An unknown name raises UnknownFieldError when it is reached; fields
        before it in `values` have already been filled by then.
        """
        for name, value in values.items():
            if name not in self._fields:
                raise UnknownFieldError(name, self._fields)

            element = self.field(name)

            if self.driver.control_kind(element) is ControlKind.SCALAR:
                logger.debug("Set '%s' to %r", name, value)
                self.driver.set_value(element, value)
            else:
                for option in as_value_list(value):
                    logger.debug("Select %r in '%s'", option, name)
                    self.driver.select_option(element, option)
        return self

    # Reads every field's current value
    def values(self) -> dict:
        return {name: self.field(name).get_value() for name in self._fields}

    def __getattr__(self, item):
        accessors = self.__dict__.get("_accessors", {})
        if item in accessors:
            return accessors[item]
        raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{item}'")

    def __dir__(self):
        return list(super().__dir__()) + list(self._accessors)

    def __contains__(self, name):
        return name in self._fields

    def __iter__(self):
        return iter(self._fields)

    def __len__(self):
        return len(self._fields)

    def __str__(self):
        return f"<FieldSet fields={list(self._fields)}>"

    __repr__ = __str__
