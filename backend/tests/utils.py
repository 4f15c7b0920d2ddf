"""
Test utilities and helper functions.
"""

from core.result_code import ResultCode


class EnvelopeAssertions:
    """Helper class for common assertions on envelope bodies."""

    @staticmethod
    def assert_success(body, data=None):
        """Assert that a response body is a success envelope."""
        assert body["success"] is True
        assert body["code"] == ResultCode.SUCCESS.code
        assert body["message"] == ""
        if data is not None:
            assert body["data"] == data

    @staticmethod
    def assert_failure(body, result_code: ResultCode, message=None):
        """Assert that a response body is a failure envelope."""
        assert body["success"] is False
        assert body["code"] == result_code.code
        assert body["data"] is None
        assert body["message"] == (result_code.msg if message is None else message)
