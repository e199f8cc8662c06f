from typing import Any, Optional

from pydantic import BaseModel


class ProblemDetail(BaseModel):
    """RFC 7807 compliant error response."""

    type: str = "about:blank"
    title: str
    detail: Optional[str] = None
    status: int
    instance: Optional[str] = None
    code: str


class DomainException(Exception):
    """Base class for domain-specific exceptions."""

    def __init__(
        self,
        status_code: int,
        title: str,
        *,
        code: str,
        detail: str | None = None,
        type_: str = "about:blank",
    ) -> None:
        self.status_code = status_code
        self.title = title
        self.detail = detail
        self.type = type_
        self.code = code


class InvalidRolls(DomainException):
    def __init__(self, token: Any, position: Optional[int], reason: str) -> None:
        super().__init__(
            status_code=422,
            title="Invalid roll",
            detail=reason,
            code="invalid_roll_token",
        )
        self.token = token
        self.position = position


class TooManyRolls(DomainException):
    def __init__(self, count: int, limit: int) -> None:
        super().__init__(
            status_code=422,
            title="Too many rolls",
            detail=f"{count} rolls submitted; at most {limit} allowed",
            code="too_many_rolls",
        )
