"""Stateful Everli client: sign-in, location, stores and availability."""

from __future__ import annotations

import logging
import re
from types import TracebackType

import httpx
from pydantic import ValidationError

from everli.auth import sign_in
from everli.availability import fetch_availability
from everli.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TRACK_FROM,
    Settings,
    require_credentials,
)
from everli.models import Availability, InitResponse, Store
from everli.stores import fetch_stores

INIT_PATH = "/sm/api/v3/init"
LOCATION_LINK_RE = re.compile(r"#/locations/(\d+)/stores")

# Network and HTTP status failures surface as httpx's own exceptions.
TransportError = httpx.HTTPError

logger = logging.getLogger(__name__)


class ProtocolShapeError(Exception):
    """Raised when the init response carries no usable location link."""


class SessionClient:
    """Client for one signed-in Everli session.

    The bearer token and the delivery location are fetched lazily, once, and
    kept for the lifetime of the instance. Calls are meant to be awaited one
    at a time; overlapping calls on the same instance may sign in twice.
    """

    def __init__(
        self,
        email: str | None,
        password: str | None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        track_from: str = DEFAULT_TRACK_FROM,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        require_credentials(email, password)
        self._email = email
        self._password = password
        self._track_from = track_from
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            base_url=base_url, timeout=timeout
        )
        self.token: str | None = None
        self.user_id: str | None = None
        self.location: str | None = None

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> SessionClient:
        """Build a client from ``EVERLI_*`` settings."""
        settings = settings or Settings()
        return cls(
            settings.email,
            settings.password,
            base_url=settings.base_url,
            timeout=settings.timeout,
            track_from=settings.track_from,
        )

    @property
    def email(self) -> str:
        return self._email

    async def __aenter__(self) -> SessionClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this session created it."""
        if self._owns_client:
            await self._http.aclose()

    async def authenticate(self) -> None:
        """Sign in unless a token is already held."""
        if self.token:
            return

        result = await sign_in(
            self._http, self._email, self._password, track_from=self._track_from
        )
        user = result.data.user
        self.token = user.auth_token
        self.user_id = user.user_id
        self._http.headers["Authorization"] = f"Bearer {self.token}"

    async def resolve_location(self) -> None:
        """Resolve the delivery location from the init endpoint, once."""
        await self.authenticate()

        if self.location:
            return

        response = await self._http.get(INIT_PATH)
        response.raise_for_status()
        try:
            next_link = InitResponse.model_validate(response.json()).data.next_link
        except (ValueError, ValidationError) as e:
            raise ProtocolShapeError("Malformed initialization response") from e

        match = LOCATION_LINK_RE.search(next_link or "")
        if not match:
            raise ProtocolShapeError(
                f'Wrong "next_link" in initialization phase: {next_link!r}'
            )

        self.location = match.group(1)
        logger.info("location_resolved", extra={"location_id": self.location})

    async def list_stores(self, location: str | None = None) -> list[Store]:
        """List the stores of ``location``, or of the resolved location."""
        if location:
            await self.authenticate()
        else:
            await self.resolve_location()
            location = self.location
        return await fetch_stores(self._http, location)

    async def list_availability(self, store: Store) -> list[Availability]:
        """List the valid delivery slots of ``store``, day by day.

        Uses the store's own location id, falling back to the resolved
        location for stores that came without one.
        """
        if not store.id:
            raise ValueError("Store has no id")
        location = store.location_id or self.location
        if not location:
            raise ValueError(f"Store {store.id} has no location id")

        await self.authenticate()
        return await fetch_availability(self._http, location, store.id)
