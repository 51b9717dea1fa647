from __future__ import annotations

from datetime import datetime
import logging
from typing import Any, List, Optional, Union

import httpx

from .const import (
    API_DOMAIN,
    API_PATH,
    APPOINTMENTS_ENDPOINT,
    CURRENT_USER,
    DEFAULT_TIMEOUT,
    GRANT_TYPE,
    TOKEN_ENDPOINT,
)
from .http import (
    AuthenticationFailed,
    HttpClient,
    MalformedResponse,
    ResponseError,
)
from .http_httpx import HttpxHttpClient
from .models import Appointment

# Logger
_LOGGER = logging.getLogger(__name__)

Timestamp = Union[int, datetime]


class ScheduleClient:
    """
    Client for the Zermelo (zportal.nl) schedule API of a single school.

    Use ``ScheduleClient.authenticate`` to exchange an authorization code for
    an access token, or ``ScheduleClient.with_access_token`` when a token is
    already known. ``fetch_appointments`` then loads the timetable of the
    token's owner into ``appointments``.

    The API only accepts the access token as a query parameter, so request
    URLs for appointments contain the credential. It is kept out of this
    library's log output, but proxies and server logs will see it.
    """

    def __init__(
        self,
        school: str,
        access_token: str,
        *,
        api_domain: str = API_DOMAIN,
        timeout: float | None = DEFAULT_TIMEOUT,
        http_client: HttpClient | None = None,
        httpx_client: httpx.Client | None = None,
    ):
        self.school = school
        self.access_token = access_token
        self.api_domain = api_domain
        self.appointments: List[Appointment] = []
        self._owns_client = http_client is None
        self._client: HttpClient = http_client or HttpxHttpClient(
            timeout=timeout, httpx_client=httpx_client
        )

    @property
    def api_url(self) -> str:
        return f"https://{self.school}.{self.api_domain}{API_PATH}"

    @classmethod
    def authenticate(
        cls,
        school: str,
        code: str,
        *,
        grant_type: str = GRANT_TYPE,
        **options: Any,
    ) -> "ScheduleClient":
        """Exchange a one-time authorization code for an access token.

        Args:
            school: School identifier, the subdomain of zportal.nl
            code: Authorization code from the portal; spaces are removed
            grant_type: OAuth grant type sent to the token endpoint
            **options: Passed on to the constructor (api_domain, timeout,
                http_client, httpx_client)

        Returns:
            A client holding the new access token and no appointments

        Raises:
            AuthenticationFailed: The token endpoint did not answer with 200
            TransportError: The API could not be reached
            MalformedResponse: The answer holds no access token
        """
        client = cls(school, "", **options)
        try:
            client.access_token = client._request_access_token(code, grant_type)
        except Exception:
            client.close()
            raise
        return client

    @classmethod
    def with_access_token(
        cls, school: str, access_token: str, **options: Any
    ) -> "ScheduleClient":
        """Create a client for an access token obtained earlier. No request is made."""
        return cls(school, access_token, **options)

    def _request_access_token(self, code: str, grant_type: str) -> str:
        # The API rejects codes containing whitespace; the portal shows them in groups
        code = "".join(code.split())
        _LOGGER.debug("Requesting access token for school %s", self.school)

        resp = self._client.request(
            "post",
            f"{self.api_url}/{TOKEN_ENDPOINT}",
            data={"grant_type": grant_type, "code": code},
        )
        if resp.status_code != 200:
            _LOGGER.warning(
                "Token exchange for school %s rejected with HTTP %s",
                self.school,
                resp.status_code,
            )
        resp.raise_for_status(AuthenticationFailed)

        payload = resp.json()
        access_token = payload.get("access_token") if isinstance(payload, dict) else None
        if not isinstance(access_token, str):
            raise MalformedResponse("Token response does not contain an access_token")
        return access_token

    def fetch_appointments(self, start: Timestamp, end: Timestamp) -> List[Appointment]:
        """Fetch the appointments between ``start`` and ``end``.

        Both bounds are epoch seconds or datetimes. The result is sorted by
        start time, with appointments lacking one first, and replaces
        ``appointments``. On failure ``appointments`` is left as it was.

        Raises:
            ResponseError: The API did not answer with 200
            TransportError: The API could not be reached
            MalformedResponse: The body is not JSON or not shaped as expected
        """
        params = {
            "user": CURRENT_USER,
            "start": self._to_epoch(start),
            "end": self._to_epoch(end),
            "access_token": self.access_token,
        }
        _LOGGER.debug(
            "Fetching appointments for school %s from %s to %s",
            self.school,
            params["start"],
            params["end"],
        )

        resp = self._client.request(
            "get", f"{self.api_url}/{APPOINTMENTS_ENDPOINT}", params=params
        )
        resp.raise_for_status(ResponseError)

        appointments = self._parse_appointments(resp.json())
        appointments.sort(key=lambda appointment: appointment.sort_key)
        _LOGGER.debug("Received %d appointments", len(appointments))

        self.appointments = appointments
        return appointments

    def _parse_appointments(self, payload: Any) -> List[Appointment]:
        # Everything is wrapped in {"response": {"data": [...]}}
        envelope = payload.get("response") if isinstance(payload, dict) else None
        raw_appointments = envelope.get("data") if isinstance(envelope, dict) else None
        if not isinstance(raw_appointments, list):
            raise MalformedResponse("Response does not contain response.data list")

        appointments = []
        for raw in raw_appointments:
            try:
                appointments.append(Appointment.from_dict(raw))
            except ValueError as e:
                appointment_id = raw.get("id") if isinstance(raw, dict) else None
                _LOGGER.warning(f"Rejecting appointment {appointment_id} due to parsing error: {e}")
                raise MalformedResponse(f"Invalid appointment: {e}") from e
        return appointments

    @staticmethod
    def _to_epoch(value: Timestamp) -> int:
        if isinstance(value, datetime):
            return int(value.timestamp())
        return value

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "ScheduleClient":
        return self

    def __exit__(self, *exc_info: Any) -> Optional[bool]:
        self.close()
        return None
