"""
Command models for the HabitTracker store.

Commands are the only way to change an ActivityState. They form a closed
union of four variants, each tagged with a ``type`` string so they can be
logged, replayed, or built from plain dictionaries.

Classes:
    CommandType: Enum of the four command tags
    AddActivity, DeleteActivity, CompleteActivity, RemoveCompletion

Functions:
    parse_command: Build a command from a mapping, None for unknown tags
"""

from enum import Enum
from typing import Annotated, Any, Dict, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .activity import Activity, ActivityCompletion


class CommandType(str, Enum):
    """Tags for the commands understood by the store."""

    ADD_ACTIVITY = "ADD_ACTIVITY"
    DELETE_ACTIVITY = "DELETE_ACTIVITY"
    COMPLETE_ACTIVITY = "COMPLETE_ACTIVITY"
    REMOVE_COMPLETION = "REMOVE_COMPLETION"


class _Command(BaseModel):
    model_config = ConfigDict(frozen=True)

    def to_log_dict(self) -> Dict[str, Any]:
        """Summarise the command for event logging without the full payload."""
        payload = getattr(self, "payload")
        if isinstance(payload, BaseModel):
            payload = getattr(payload, "id")
        return {"commandType": getattr(self, "type"), "target": payload}


class AddActivity(_Command):
    type: Literal["ADD_ACTIVITY"] = "ADD_ACTIVITY"
    payload: Activity


class DeleteActivity(_Command):
    type: Literal["DELETE_ACTIVITY"] = "DELETE_ACTIVITY"
    payload: str = Field(..., description="Id of the activity to delete")


class CompleteActivity(_Command):
    type: Literal["COMPLETE_ACTIVITY"] = "COMPLETE_ACTIVITY"
    payload: ActivityCompletion


class RemoveCompletion(_Command):
    type: Literal["REMOVE_COMPLETION"] = "REMOVE_COMPLETION"
    payload: str = Field(..., description="Id of the completion to remove")


ActivityCommand = Union[AddActivity, DeleteActivity, CompleteActivity, RemoveCompletion]

_command_adapter: TypeAdapter = TypeAdapter(
    Annotated[ActivityCommand, Field(discriminator="type")]
)

_KNOWN_TYPES = frozenset(t.value for t in CommandType)


def parse_command(data: Mapping[str, Any]) -> Optional[ActivityCommand]:
    """
    Build a command from a plain mapping such as ``{"type": ..., "payload": ...}``.

    Mappings whose ``type`` is not one of the four known tags yield None;
    the store treats that as a no-op.

    Args:
        data: Mapping with a ``type`` key and an optional ``payload``

    Returns:
        The validated command, or None for an unknown tag

    Raises:
        pydantic.ValidationError: If the tag is known but the payload is malformed
    """
    command_type = data.get("type")
    if isinstance(command_type, CommandType):
        command_type = command_type.value
    if not isinstance(command_type, str) or command_type not in _KNOWN_TYPES:
        return None

    return _command_adapter.validate_python({**data, "type": command_type})
