"""User endpoints."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from ..errors import LaundreeClientError, LaundreeNotFoundError
from ..http import LaundreeHttpClient
from ..models import (
    AddOneSignalPlayerIdBody,
    ChangeUserPasswordBody,
    CreateTokenBody,
    CreateUserBody,
    CreateUserWithLaundryBody,
    LocaleType,
    PasswordResetBody,
    SignUpUserBody,
    StartEmailVerificationBody,
    StartPasswordResetBody,
    TokenWithSecret,
    UpdateUserBody,
    ValidateCredentialsBody,
    ValidateCredentialsResult,
    VerifyEmailBody,
    VerifyTokenBody,
)
from .base import ResourceEndpoint

_LOGGER = logging.getLogger(__name__)


class UserApi:
    """Operations on ``/users``."""

    def __init__(self, http: LaundreeHttpClient) -> None:
        self._endpoint = ResourceEndpoint(http, "users")
        self._http = http

    async def get(self, user_id: str) -> Any:
        return await self._endpoint.get(user_id)

    async def delete(self, user_id: str) -> None:
        await self._endpoint.delete(user_id)

    async def create_token(self, user_id: str, body: CreateTokenBody) -> TokenWithSecret:
        return await self._http.post(self._endpoint.path(user_id, "tokens"), body)

    async def verify_token(self, user_id: str, body: VerifyTokenBody) -> None:
        await self._http.post(self._endpoint.path(user_id, "tokens", "verify"), body)

    async def verify_email(self, user_id: str, body: VerifyEmailBody) -> None:
        await self._http.post(self._endpoint.path(user_id, "verify-email"), body)

    async def validate_credentials(
        self, body: ValidateCredentialsBody
    ) -> ValidateCredentialsResult:
        return await self._http.post(self._endpoint.path("validate-credentials"), body)

    async def create_user_from_profile(self, body: dict[str, Any]) -> Any:
        """Create a user from an OAuth provider profile."""
        return await self._http.post(self._endpoint.path("profile"), body)

    async def create_user_with_laundry(self, body: CreateUserWithLaundryBody) -> Any:
        """Create a user and a laundry owned by them in one call.

        Returns ``{"user": ..., "laundry": ...}``.
        """
        return await self._http.post(self._endpoint.path("with-laundry"), body)

    async def from_email(self, email: str) -> Any | None:
        """Look up the single user registered with ``email``.

        Returns None unless exactly one user matches.
        """
        users = await self._http.get(f"/users?email={quote(email, safe='')}")
        if not users or len(users) != 1:
            return None
        return users[0]

    async def create_user(self, body: CreateUserBody) -> Any:
        return await self._http.post(self._endpoint.path(), body)

    async def sign_up_user(self, body: SignUpUserBody) -> Any:
        """Create a user and start verification of their email address."""
        user = await self.create_user(
            {
                "displayName": body["displayName"],
                "email": body["email"],
                "password": body["password"],
            }
        )
        if not user:
            raise LaundreeClientError("Failed to create user")
        verification: StartEmailVerificationBody = {"email": body["email"]}
        if body.get("locale"):
            verification["locale"] = body["locale"]
        await self._start_email_verification(user["id"], verification)
        return user

    async def start_email_verification(self, body: StartEmailVerificationBody) -> None:
        """Send a new verification email to the user owning ``body["email"]``.

        Raises:
            LaundreeNotFoundError: If no user is registered with the email
        """
        user = await self.from_email(body["email"])
        if not user:
            raise LaundreeNotFoundError("User not found")
        await self._start_email_verification(user["id"], body)

    async def forgot_password(
        self, email: str, locale: LocaleType | None = None
    ) -> None:
        """Start a password reset for the user registered with ``email``.

        Raises:
            LaundreeNotFoundError: If no user is registered with the email
        """
        user = await self.from_email(email)
        if not user:
            raise LaundreeNotFoundError("User not found")
        body: StartPasswordResetBody = {"locale": locale} if locale else {}
        await self.start_password_reset(user["id"], body)

    async def reset_password(self, user_id: str, body: PasswordResetBody) -> None:
        await self._http.post(self._endpoint.path(user_id, "password-reset"), body)

    async def list_emails(self, user_id: str) -> list[str]:
        return await self._http.get(self._endpoint.path(user_id, "emails"))

    async def add_one_signal_player_id(
        self, user_id: str, body: AddOneSignalPlayerIdBody
    ) -> None:
        await self._http.post(
            self._endpoint.path(user_id, "one-signal-player-ids"), body
        )

    async def update_user(self, user_id: str, body: UpdateUserBody) -> Any:
        return await self._http.put(self._endpoint.path(user_id), body)

    async def change_password(self, user_id: str, body: ChangeUserPasswordBody) -> None:
        await self._http.post(self._endpoint.path(user_id, "password-change"), body)

    async def start_password_reset(
        self, user_id: str, body: StartPasswordResetBody | None = None
    ) -> None:
        await self._http.post(
            self._endpoint.path(user_id, "start-password-reset"), body
        )

    async def _start_email_verification(
        self, user_id: str, body: StartEmailVerificationBody
    ) -> None:
        _LOGGER.debug("Starting email verification for user %s", user_id)
        await self._http.post(
            self._endpoint.path(user_id, "start-email-verification"), body
        )
