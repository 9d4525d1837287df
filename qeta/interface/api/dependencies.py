"""Request parsing shared by the routes."""

from typing import Annotated, Any, Optional

from fastapi import Cookie, Depends, Header, Path, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from qeta.domain.error import AuthenticationError
from qeta.domain.repository import QuestionQuery
from qeta.domain.value import QuestionOrderBy, SortDirection


def get_credentials(
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> str | None:
    """Extract the JWT from the Authorization header or the auth cookie.

    Raises:
        AuthenticationError: If an Authorization header is sent with a
            scheme other than Bearer
    """
    if authorization:
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            raise AuthenticationError("Unsupported authorization header")
        return token.strip()
    return auth_token


Credentials = Annotated[str | None, Depends(get_credentials)]

# Ids are int4 serial columns
MAX_RECORD_ID = 2**31 - 1

RecordId = Annotated[int, Path(ge=1, le=MAX_RECORD_ID)]


class QuestionFilters(BaseModel):
    """Query string accepted by question listings, in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")

    limit: Optional[int] = Field(default=None, ge=0)
    offset: Optional[int] = Field(default=None, ge=0)
    author: Optional[str] = None
    order_by: Optional[QuestionOrderBy] = None
    order: SortDirection = SortDirection.DESC
    no_correct_answer: bool = False
    no_answers: bool = False
    favorite: bool = False
    no_votes: bool = False
    tags: Optional[list[str]] = None
    entity: Optional[str] = None
    search_query: Optional[str] = None
    include_answers: bool = False
    include_votes: bool = False
    include_entities: bool = False
    include_trend: bool = False
    include_comments: bool = False


def get_question_filters(request: Request) -> QuestionQuery:
    """Parse listing filters from the query string.

    `tags` may be repeated, with or without the `[]` suffix. Unknown
    parameters are rejected.

    Raises:
        RequestValidationError: If the query string doesn't match
    """
    params: dict[str, Any] = {}
    for key, value in request.query_params.multi_items():
        if key in ("tags", "tags[]"):
            params.setdefault("tags", []).append(value)
        else:
            params[key] = value

    try:
        filters = QuestionFilters.model_validate(params)
    except PydanticValidationError as e:
        raise RequestValidationError(
            [
                {"loc": ("query", *err["loc"]), "msg": err["msg"], "type": err["type"]}
                for err in e.errors()
            ]
        )

    return QuestionQuery(**filters.model_dump())


QuestionFiltersQuery = Annotated[QuestionQuery, Depends(get_question_filters)]
