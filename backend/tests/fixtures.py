"""
Test fixtures for building apps and failures.
"""

import json

from fastapi import FastAPI
from sqlalchemy.exc import CompileError, ProgrammingError

from app_factory import create_app
from config import ErrorHandlingSettings, Settings
from core.exceptions import BusinessException
from core.result_code import ResultCode

DENIED_DRIVER_MESSAGE = "(1142, \"DELETE command denied to user 'demo'@'localhost' for table 'sys_user'\")"
UNKNOWN_TABLE_MESSAGE = "(1146, \"Table 'demo.sys_usr' doesn't exist\")"


def create_test_settings(fallback_enabled: bool = True) -> Settings:
    """Create settings for tests: no file logging, quiet console."""
    return Settings(
        environment="testing",
        debug=False,
        log_level="WARNING",
        log_file=False,
        error_handling=ErrorHandlingSettings(fallback_enabled=fallback_enabled)
    )


def create_programming_error(driver_message: str) -> ProgrammingError:
    """Create the error SQLAlchemy raises when the database rejects a statement."""
    return ProgrammingError("DELETE FROM sys_user", {}, Exception(driver_message))


def create_test_app(fallback_enabled: bool = True) -> FastAPI:
    """Create the application plus routes that raise each library failure."""
    app = create_app(create_test_settings(fallback_enabled))

    @app.get("/failures/illegal-argument")
    async def raise_value_error():
        raise ValueError("page size must be a multiple of 5")

    @app.get("/failures/serialization")
    async def raise_json_error():
        return json.loads("{\"name\": ")

    @app.get("/failures/denied")
    async def raise_denied():
        raise create_programming_error(DENIED_DRIVER_MESSAGE)

    @app.get("/failures/grammar")
    async def raise_grammar():
        raise create_programming_error(UNKNOWN_TABLE_MESSAGE)

    @app.get("/failures/syntax")
    async def raise_syntax():
        raise CompileError("Unconsumed column names: nickname")

    @app.get("/failures/business")
    async def raise_business():
        raise BusinessException("余额不足")

    @app.get("/failures/business-code")
    async def raise_business_code():
        raise BusinessException(ResultCode.DATA_NOT_FOUND)

    @app.get("/failures/unexpected")
    async def raise_unexpected():
        raise RuntimeError("connection pool exhausted at 10.0.0.7")

    return app
