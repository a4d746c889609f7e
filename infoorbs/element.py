"""Base class for the drawable elements of a web data screen."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from infoorbs.screen import Display
from infoorbs.utils import string_to_color

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class WebDataElement(ABC):
    """A drawable element parsed from JSON.

    Assigning a different value to any public attribute that is already set
    marks the element as changed.
    """

    changed: bool = False

    def __setattr__(self, name: str, value: Any) -> None:
        if (
            name != "changed"
            and not name.startswith("_")
            and name in self.__dict__
            and self.__dict__[name] != value
        ):
            object.__setattr__(self, "changed", True)
        object.__setattr__(self, name, value)

    @abstractmethod
    def parse_data(self, doc: Mapping[str, Any], default_color: int, default_background: int) -> None:
        """Take the element's values from a JSON object."""

    @abstractmethod
    def draw(self, display: Display) -> None:
        """Draw the element on the selected screen."""

    @staticmethod
    def _get(doc: Any, key: str) -> Any:
        return doc.get(key) if isinstance(doc, Mapping) else None

    @classmethod
    def _int_field(cls, doc: Any, key: str) -> int | None:
        """The value under key if it is a 32-bit integer, otherwise None."""
        value = cls._get(doc, key)
        if isinstance(value, int) and not isinstance(value, bool) and INT32_MIN <= value <= INT32_MAX:
            return value
        return None

    @classmethod
    def _bool_field(cls, doc: Any, key: str) -> bool | None:
        value = cls._get(doc, key)
        return value if isinstance(value, bool) else None

    @classmethod
    def _str_field(cls, doc: Any, key: str) -> str | None:
        value = cls._get(doc, key)
        return value if isinstance(value, str) else None

    @classmethod
    def _as_int(cls, doc: Any, key: str) -> int:
        """The value under key converted to an integer; 0 when it is not numeric."""
        value = cls._get(doc, key)
        if isinstance(value, (bool, int)):
            return int(value)
        if isinstance(value, float) and math.isfinite(value):
            return int(value)
        return 0

    @classmethod
    def _color_field(cls, doc: Any, key: str, default: int) -> int:
        """A colour given by name under key, or the default."""
        name = cls._str_field(doc, key)
        return default if name is None else int(string_to_color(name))