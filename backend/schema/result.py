"""
Uniform response envelope returned by every endpoint.
"""

from typing import Generic, Optional, TypeVar, Union

from pydantic import BaseModel, Field, model_validator

from core.result_code import ResultCode

T = TypeVar('T')


class Result(BaseModel, Generic[T]):
    """Success/failure envelope serialized as the HTTP response body."""
    success: bool = Field(..., description="Whether the request was successful")
    code: int = Field(..., description="Stable result code")
    message: str = Field("", description="Human-readable message")
    data: Optional[T] = Field(None, description="Payload, success only")

    @model_validator(mode='after')
    def check_failure_has_no_data(self):
        if not self.success and self.data is not None:
            raise ValueError('A failure envelope must not carry data')
        return self

    @classmethod
    def ok(cls, data: Optional[T] = None) -> 'Result[T]':
        """Build a success envelope around ``data``."""
        return cls(success=True, code=ResultCode.SUCCESS.code, message="", data=data)

    @classmethod
    def failed(
        cls,
        result_code: Union[ResultCode, str, None] = None,
        message: Optional[str] = None
    ) -> 'Result[T]':
        """
        Build a failure envelope.

        ``failed(code)`` uses the code's default message, ``failed(code, msg)``
        overrides it, and ``failed(msg)`` uses the generic ``FAILED`` code.
        """
        if isinstance(result_code, str):
            result_code, message = ResultCode.FAILED, result_code
        result_code = result_code or ResultCode.FAILED
        return cls(
            success=False,
            code=result_code.code,
            message=result_code.msg if message is None else message
        )
