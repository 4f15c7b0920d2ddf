"""
Message extraction for unreadable request bodies.
"""

import re
from typing import Optional


class MessageExtractor:
    """Turns a deserialization error's text into a single-field message."""

    FIELD_TYPE_ERROR_TEMPLATE = "{field}字段类型错误"

    def __init__(self):
        # A run of ["segment"] groups; the last repetition is the leaf field.
        self.field_path_pattern = re.compile(r'(?:\["(.*?)"\])+')

    def extract(self, cause: Optional[BaseException]) -> str:
        """Return ``"<field>字段类型错误"`` or ``""`` when no field path is present."""
        if cause is None:
            return ""
        match = self.field_path_pattern.search(self.describe(cause))
        if not match:
            return ""
        field = match.group(1).replace('"', "")
        return self.FIELD_TYPE_ERROR_TEMPLATE.format(field=field)

    @staticmethod
    def describe(cause: BaseException) -> str:
        cls = type(cause)
        return f"{cls.__module__}.{cls.__qualname__}: {cause}"
