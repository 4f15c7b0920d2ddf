"""
Demo router.

Small endpoints that exercise the result envelope and every common failure
path: missing/typed/constrained parameters, body validation, enum conversion
and declared business failures.
"""
import itertools
from typing import Dict

from fastapi import APIRouter, Depends, Path

from config.logging_config import get_api_logger
from core.enums import GenderEnum, StatusEnum
from core.exceptions import BusinessException
from core.result_code import ResultCode
from schema import PageResult, Result
from schema.demo import EnumItem, UserForm, UserQuery, UserView
from .base import BaseRouter


def bind_user_query(page_num: int = 1, page_size: int = 10, status: int = 1) -> UserQuery:
    """Bind query parameters onto UserQuery; constraint failures surface as binding failures."""
    return UserQuery(page_num=page_num, page_size=page_size, status=status)


class DemoRouter(BaseRouter):
    """Router for demo endpoints."""

    def __init__(self):
        super().__init__()
        self.logger = get_api_logger()
        self._users: Dict[int, UserView] = {}
        self._ids = itertools.count(1)

    def get_router(self) -> APIRouter:
        """Get demo router."""
        router = APIRouter(prefix="/demo", tags=["demo"])

        @router.get("/text")
        async def echo_text(text: str) -> Result[str]:
            """Echo the given text inside a success envelope."""
            return Result.ok(text)

        @router.get("/users")
        async def list_users(query: UserQuery = Depends(bind_user_query)) -> Result[PageResult[UserView]]:
            """List users page by page."""
            users = list(self._users.values())
            page = users[query.offset:query.offset + query.page_size]
            return Result.ok(PageResult[UserView](list=page, total=len(users)))

        @router.get("/users/{user_id}")
        async def get_user(user_id: int = Path(..., ge=1)) -> Result[UserView]:
            """Get one user by ID."""
            user = self._users.get(user_id)
            if user is None:
                raise BusinessException(ResultCode.DATA_NOT_FOUND)
            return Result.ok(user)

        @router.post("/users")
        async def create_user(form: UserForm) -> Result[UserView]:
            """Create a user."""
            if any(user.name == form.name for user in self._users.values()):
                raise BusinessException(ResultCode.DATA_ALREADY_EXISTS, f"用户{form.name}已存在")

            user = UserView(
                id=next(self._ids),
                name=form.name,
                age=form.age,
                gender_label=GenderEnum.get_label_by_value(form.gender)
            )
            self._users[user.id] = user
            self.logger.info(f"👤 Demo user created - id: {user.id}")
            return Result.ok(user)

        @router.get("/status/{value}")
        async def get_status(value: int) -> Result[EnumItem]:
            """Resolve a status value to its label."""
            status = StatusEnum.from_value(value)
            return Result.ok(EnumItem(value=status.value, label=status.label))

        return router
