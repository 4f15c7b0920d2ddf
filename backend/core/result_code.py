"""
Result code registry.

Every envelope returned to a client carries one of these codes. Codes are an
external contract: once released, a code keeps its meaning forever.
"""

from enum import Enum, unique
from typing import Optional


@unique
class ResultCode(Enum):
    """Closed set of (code, default message) pairs."""
    SUCCESS = (200, "操作成功")

    # Generic failure (1000)
    FAILED = (1000, "操作失败")

    # Request parameter errors (1001-1099)
    PARAM_ERROR = (1001, "参数错误")
    PARAM_IS_NULL = (1002, "参数为空")

    # Resource / permission errors (1100-1199)
    RESOURCE_NOT_FOUND = (1101, "请求资源不存在")
    FORBIDDEN_OPERATION = (1102, "禁止操作，当前环境不允许修改或删除重要数据")

    # Business errors (2000-2999)
    DATA_NOT_FOUND = (2001, "数据不存在")
    DATA_ALREADY_EXISTS = (2002, "数据已存在")

    # System errors (5000-5999)
    SYSTEM_ERROR = (5000, "系统执行出错")

    def __new__(cls, code: int, msg: str):
        obj = object.__new__(cls)
        obj._value_ = code
        obj.msg = msg
        return obj

    @property
    def code(self) -> int:
        return self.value

    @classmethod
    def from_code(cls, code: int) -> Optional["ResultCode"]:
        """Look up an entry by its numeric code."""
        try:
            return cls(code)
        except ValueError:
            return None


def get_result_code(name: str) -> ResultCode:
    """Look up an entry by symbolic name, e.g. ``"PARAM_ERROR"``.

    Raises:
        KeyError: If no entry has that name.
    """
    return ResultCode[name]
