"""
Value/label enumerations shared across the API.
"""

from enum import Enum
from typing import Any, Optional

from core.exceptions import TypeConversionFailure


class LabeledEnum(Enum):
    """
    Enumeration whose members carry a stored value and a display label.

    Members are declared as ``NAME = (value, label)``; ``member.value`` is the
    stored value.
    """

    def __new__(cls, value, label: str):
        obj = object.__new__(cls)
        obj._value_ = value
        obj.label = label
        return obj

    @classmethod
    def from_value(cls, value: Any) -> "LabeledEnum":
        """
        Convert a stored value to its member.

        Raises:
            TypeConversionFailure: If no member has that value.
        """
        for member in cls:
            if member.value == value:
                return member
        raise TypeConversionFailure(f"Cannot convert value '{value}' to {cls.__name__}")

    @classmethod
    def get_label_by_value(cls, value: Any) -> Optional[str]:
        for member in cls:
            if member.value == value:
                return member.label
        return None

    @classmethod
    def get_value_by_label(cls, label: str) -> Optional[Any]:
        for member in cls:
            if member.label == label:
                return member.value
        return None


class StatusEnum(LabeledEnum):
    ENABLE = (1, "启用")
    DISABLE = (0, "禁用")


class GenderEnum(LabeledEnum):
    MALE = (1, "男")
    FEMALE = (2, "女")
