import re

_NON_WORD = re.compile(r"[^0-9a-zA-Z]+")


def to_accessor_name(name: str, suffix: str) -> str:
    """
    Derive the accessor name of a form field from its logical name.

    Args:
        name (str): Logical field name, e.g. "email" or "First name".
        suffix (str): Suffix appended to the normalized name, e.g. "_field".

    Returns:
        str: Lower-case snake case name plus suffix, e.g. "first_name_field".
    """
    base = _NON_WORD.sub("_", name.strip()).strip("_").lower()
    return f"{base}{suffix}"


def as_value_list(value) -> list:
    """
    Treat a single value as a one-element list; lists, tuples and sets are
    expanded. Strings and bytes are single values.
    """
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


def contains_text(content: str, text: str) -> bool:
    """
    Case-insensitive substring check with whitespace collapsed on both sides,
    the same rule Playwright applies to has_text filters.
    """
    return " ".join(text.split()).lower() in " ".join(content.split()).lower()
