"""
API routes - Registration and lookup endpoints.

Defines the two endpoints of the user registry:
- POST /register - Register a user under a unique email
- GET /user - Look a user up by email

Errors are returned as text/plain bodies. Status codes are chosen from
the domain error's kind, per endpoint.
"""

import logging

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError as DecodeError
from starlette.concurrency import run_in_threadpool
from starlette.types import Receive, Scope, Send

from src.api.dependencies import get_user_service
from src.api.models import RegisterRequest, UserResponse, validate_email
from src.domain.exceptions import ErrorKind, UserRegistryError
from src.domain.ports import UserService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])

# Unlisted kinds map to 500
_REGISTER_STATUS = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONFLICT: status.HTTP_403_FORBIDDEN,
}
_GET_USER_STATUS = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def _error_response(exc: UserRegistryError, statuses: dict[ErrorKind, int]) -> PlainTextResponse:
    """Translate a domain error into a plain-text response."""
    status_code = statuses.get(exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Request failed: %s", exc, exc_info=exc)
        return PlainTextResponse("Internal server error", status_code=status_code)
    return PlainTextResponse(str(exc), status_code=status_code)


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses={
        400: {"description": "Malformed JSON or validation error"},
        403: {"description": "Email already in use"},
        405: {"description": "Method other than POST"},
        500: {"description": "Internal error"},
    },
    summary="Register a new user",
    description="Submit an email and a name. The email must not be registered yet.",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": RegisterRequest.model_json_schema()}},
        }
    },
)
async def register(
    request: Request,
    service: UserService = Depends(get_user_service),
) -> Response:
    """
    Register a new user.

    - **email**: Email address, must contain '@'
    - **name**: Non-empty display name

    Returns 201 with an empty body on success.
    """
    body = await request.body()
    try:
        request_data = RegisterRequest.model_validate_json(body)
    except DecodeError:
        return PlainTextResponse(
            "Unable to read your request", status_code=status.HTTP_400_BAD_REQUEST
        )

    try:
        params = request_data.validate_params()
        await run_in_threadpool(service.register, params)
    except UserRegistryError as exc:
        return _error_response(exc, _REGISTER_STATUS)

    return Response(status_code=status.HTTP_201_CREATED)


@router.get(
    "/user",
    response_model=UserResponse,
    responses={
        400: {"description": "Missing or invalid email"},
        404: {"description": "User not found"},
        405: {"description": "Method other than GET"},
        500: {"description": "Internal error"},
    },
    summary="Get a user by email",
    description="Look up a registered user by the email query parameter.",
)
async def get_user(
    email: str = Query(default="", description="Email the user registered with"),
    service: UserService = Depends(get_user_service),
) -> UserResponse | PlainTextResponse:
    """
    Get a registered user.

    - **email**: Email address the user registered with
    """
    try:
        validate_email(email)
        user = await run_in_threadpool(service.get_by_email, email)
    except UserRegistryError as exc:
        return _error_response(exc, _GET_USER_STATUS)

    return UserResponse.from_user(user)


class MethodNotAllowed:
    """
    ASGI endpoint answering any request it receives with a plain-text 405.

    Registered without a method list after the real route for a path, so
    it catches every other method, including ones FastAPI doesn't know.
    """

    def __init__(self, message: str, allowed: str) -> None:
        self.message = message
        self.allowed = allowed

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        response = PlainTextResponse(
            self.message,
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            headers={"Allow": self.allowed},
        )
        await response(scope, receive, send)


router.add_route(
    "/register",
    MethodNotAllowed("Register requires a post request", allowed="POST"),
    include_in_schema=False,
)
router.add_route(
    "/user",
    MethodNotAllowed("GetUser requires a get request", allowed="GET"),
    include_in_schema=False,
)
