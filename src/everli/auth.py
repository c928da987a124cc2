"""Everli email/password sign-in."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from everli.config import DEFAULT_TRACK_FROM
from everli.models import SignInResponse

SIGNIN_PATH = "/user/api/v4/local/signin"

logger = logging.getLogger(__name__)


class AuthenticationError(Exception):
    """Raised when signing in to Everli fails, whatever the cause."""


async def sign_in(
    client: httpx.AsyncClient,
    email: str,
    password: str,
    track_from: str = DEFAULT_TRACK_FROM,
) -> SignInResponse:
    """Sign in with email and password and return the parsed response.

    Every failure is reported as the same ``AuthenticationError``. The
    upstream error detail only goes to the log.
    """
    masked = mask_email(email)
    logger.info("signin_attempt", extra={"email": masked})
    try:
        response = await client.post(
            SIGNIN_PATH,
            json={
                "email": email,
                "password": password,
                "trackfrom": track_from,
            },
        )
    except httpx.HTTPError as e:
        logger.warning("signin_failure", extra={"email": masked, "error": str(e)})
        raise AuthenticationError("Wrong credentials") from e

    if not response.is_success:
        logger.warning(
            "signin_failure",
            extra={
                "email": masked,
                "status_code": response.status_code,
                "error": _error_detail(response),
            },
        )
        raise AuthenticationError("Wrong credentials")

    try:
        result = SignInResponse.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        logger.warning("signin_failure", extra={"email": masked, "error": str(e)})
        raise AuthenticationError("Wrong credentials") from e

    logger.info(
        "signin_success", extra={"email": masked, "user_id": result.data.user.user_id}
    )
    return result


def _error_detail(response: httpx.Response) -> object:
    """Pull the upstream ``error`` field out of a failed response, if any."""
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        return body.get("error", body)
    return body


def mask_email(email: str) -> str:
    """Hide the local part of an address for logging: ``s***@example.com``."""
    local, sep, domain = email.partition("@")
    return f"{local[:1]}***{sep}{domain}"
