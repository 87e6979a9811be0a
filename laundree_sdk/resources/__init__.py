"""Per-resource wrappers over the HTTP client."""

from .base import ResourceEndpoint
from .bookings import BookingApi
from .contact import ContactApi
from .invites import InviteApi
from .laundries import LaundryApi
from .machines import MachineApi
from .statistics import StatisticsApi
from .tokens import TokenApi
from .users import UserApi

__all__ = [
    "BookingApi",
    "ContactApi",
    "InviteApi",
    "LaundryApi",
    "MachineApi",
    "ResourceEndpoint",
    "StatisticsApi",
    "TokenApi",
    "UserApi",
]
