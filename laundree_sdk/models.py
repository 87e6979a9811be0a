"""Request bodies and results exchanged with the Laundree API.

These are plain JSON objects on the wire; the TypedDicts only document
their shape. Keys use the service's camelCase names.
"""

from __future__ import annotations

from typing import Literal, NotRequired, TypedDict

LocaleType = str
MachineType = Literal["wash", "dry"]
TokenType = Literal["auth", "calendar"]


class Summary(TypedDict):
    id: str
    href: str


class DateObject(TypedDict):
    year: int
    month: int
    day: int


class DateTimeObject(TypedDict):
    year: int
    month: int
    day: int
    hour: int
    minute: int


class ListOptions(TypedDict, total=False):
    q: str
    showDemo: bool
    skip: int
    limit: int


class Statistics(TypedDict):
    laundryCount: int
    userCount: int
    bookingCount: int
    machineCount: int


class TokenWithSecret(TypedDict):
    id: str
    href: str
    name: str
    owner: Summary
    secret: str


class ValidateCredentialsResult(TypedDict):
    userId: str
    emailVerified: bool


class CreateDemoLaundryResult(TypedDict):
    email: str
    password: str


class CreateInviteCodeResult(TypedDict):
    key: str
    href: str


# Request bodies


class CreateUserBody(TypedDict):
    displayName: str
    email: str
    password: str


class SignUpUserBody(TypedDict):
    displayName: str
    email: str
    password: str
    locale: NotRequired[LocaleType]


# "from" is a keyword, so these use the functional form
CreateBookingBody = TypedDict(
    "CreateBookingBody", {"from": DateTimeObject, "to": DateTimeObject}
)
UpdateBookingBody = TypedDict(
    "UpdateBookingBody", {"from": DateTimeObject, "to": DateTimeObject}, total=False
)


class ContactBody(TypedDict):
    message: str
    subject: str
    name: str
    email: str
    locale: NotRequired[LocaleType]


class ContactSupportBody(TypedDict):
    message: str
    subject: str
    locale: NotRequired[LocaleType]


class CreateLaundryBody(TypedDict):
    name: str
    googlePlaceId: str


class UpdateLaundryBody(TypedDict, total=False):
    name: str
    googlePlaceId: str
    rules: dict[str, object]


class InviteUserByEmailBody(TypedDict):
    email: str
    locale: NotRequired[LocaleType]


class CreateUserWithLaundryBody(TypedDict):
    name: str
    googlePlaceId: str
    displayName: str
    email: str
    password: str


class AddUserFromCodeBody(TypedDict):
    key: str


class VerifyInviteCodeBody(TypedDict):
    key: str


class CreateMachineBody(TypedDict):
    broken: bool
    type: MachineType
    name: str


class UpdateMachineBody(TypedDict, total=False):
    broken: bool
    type: MachineType
    name: str


class CreateTokenBody(TypedDict):
    name: str
    type: TokenType


class VerifyTokenBody(TypedDict):
    token: str
    type: TokenType


class CreateTokenFromEmailPasswordBody(TypedDict):
    name: str
    email: str
    password: str


class StartPasswordResetBody(TypedDict, total=False):
    locale: LocaleType


class PasswordResetBody(TypedDict):
    token: str
    password: str


class StartEmailVerificationBody(TypedDict):
    email: str
    locale: NotRequired[LocaleType]


class VerifyEmailBody(TypedDict):
    email: str
    token: str


class UpdateUserBody(TypedDict, total=False):
    name: str
    locale: LocaleType


class ChangeUserPasswordBody(TypedDict):
    currentPassword: str
    newPassword: str


class AddOneSignalPlayerIdBody(TypedDict):
    playerId: str


class ValidateCredentialsBody(TypedDict):
    email: str
    password: str
