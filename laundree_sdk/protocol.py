"""Protocol helpers for Laundree socket messages."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any


class JobAction(str, Enum):
    """Remote operations served over the socket."""

    LIST_BOOKINGS_IN_TIME = "listBookingsInTime"
    LIST_BOOKINGS_FOR_USER = "listBookingsForUser"
    LIST_USERS_AND_INVITES = "listUsersAndInvites"
    LIST_USERS = "listUsers"
    LIST_MACHINES = "listMachines"
    LIST_LAUNDRIES = "listLaundries"
    LIST_MACHINES_AND_USERS = "listMachinesAndUsers"
    FETCH_LAUNDRY = "fetchLaundry"
    FETCH_USER = "fetchUser"
    UPDATE_STATS = "updateStats"
    SETUP_INITIAL_EVENTS = "setupInitialEvents"


def action_name(action: str | JobAction) -> str:
    """Return the wire name of an action."""
    if isinstance(action, JobAction):
        return action.value
    return action


def build_job_message(
    action: str | JobAction, job_id: int, args: Sequence[Any] = ()
) -> dict[str, Any]:
    """Build the outgoing message for a correlated job.

    Positional arguments are keyed by their index so the message stays a
    flat JSON object: ``{"action": ..., "jobId": 7, "0": arg0, "1": arg1}``.
    """
    message: dict[str, Any] = {"action": action_name(action), "jobId": job_id}
    for index, arg in enumerate(args):
        message[str(index)] = arg
    return message


def build_event_frame(event: str, args: Sequence[Any]) -> dict[str, Any]:
    """Build the JSON frame sent over the websocket for an emitted event."""
    return {"event": event, "args": list(args)}


def read_job_id(state: Any) -> Any:
    """Read the current job identifier from a state snapshot.

    Mappings are read through the ``"job"`` key, other objects through a
    ``job`` attribute. Returns ``None`` when no job is set.
    """
    if state is None:
        return None
    if isinstance(state, Mapping):
        return state.get("job")
    return getattr(state, "job", None)
