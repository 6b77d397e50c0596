"""Pydantic models for Discord interactions and relay payloads."""
from enum import IntEnum
from typing import Optional, List, Any, Dict
from pydantic import BaseModel, Field, ValidationError
from core.errors import MalformedInteractionError, MissingOptionError


class InteractionType(IntEnum):
    """Top-level interaction kinds."""
    PING = 1
    APPLICATION_COMMAND = 2


class ApplicationCommandType(IntEnum):
    """Shape of an application command."""
    CHAT_INPUT = 1
    USER = 2


class CommandOptionType(IntEnum):
    """Option value types used by the registered commands."""
    STRING = 3


class InteractionResponseType(IntEnum):
    """Reply kinds sent back to the platform."""
    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4


EPHEMERAL = 1 << 6


class User(BaseModel):
    """Discord user."""
    id: str
    username: str
    discriminator: Optional[str] = None
    avatar: Optional[str] = None


class Member(BaseModel):
    """Guild member wrapper; carries the user when invoked inside a guild."""
    user: Optional[User] = None


class CommandOption(BaseModel):
    """Named option value of a chat-input command."""
    name: str
    type: int
    value: Optional[Any] = None


class CommandData(BaseModel):
    """Data block of an application command interaction."""
    id: Optional[str] = None
    name: str
    type: int
    target_id: Optional[str] = None
    options: List[CommandOption] = Field(default_factory=list)

    def get_string_option(self, name: str) -> str:
        """
        Decode a required string option by name.

        Raises:
            MissingOptionError: option is absent or carries no value
            MalformedInteractionError: option value is not a string
        """
        for option in self.options:
            if option.name != name:
                continue
            if option.value is None:
                break
            if not isinstance(option.value, str):
                raise MalformedInteractionError(
                    f'option "{name}" must be a string'
                )
            return option.value
        raise MissingOptionError(name)


class Interaction(BaseModel):
    """Inbound interaction payload."""
    id: Optional[str] = None
    type: int
    data: Optional[CommandData] = None
    member: Optional[Member] = None
    user: Optional[User] = None

    @classmethod
    def parse_body(cls, body: bytes) -> "Interaction":
        """Decode a raw, already verified, request body."""
        try:
            return cls.model_validate_json(body)
        except ValidationError as e:
            raise MalformedInteractionError(
                f"invalid interaction payload: {e.error_count()} error(s)"
            ) from e

    def invoking_user(self) -> User:
        """Member context wins over the direct user field."""
        if self.member and self.member.user:
            return self.member.user
        if self.user:
            return self.user
        raise MalformedInteractionError("interaction has no invoking user")


class MessageData(BaseModel):
    """Message body of a channel message response."""
    content: str
    flags: Optional[int] = None


class InteractionResponse(BaseModel):
    """Synchronous reply to exactly one interaction."""
    type: int
    data: Optional[MessageData] = None

    @classmethod
    def pong(cls) -> "InteractionResponse":
        return cls(type=InteractionResponseType.PONG)

    @classmethod
    def ephemeral(cls, content: str) -> "InteractionResponse":
        """Message visible only to the invoking user."""
        return cls(
            type=InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE,
            data=MessageData(content=content, flags=EPHEMERAL),
        )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class AllowedMentions(BaseModel):
    """Mention parsing rules; an empty list suppresses every mention."""
    parse: List[str] = Field(default_factory=list)


class DeliveryPayload(BaseModel):
    """JSON body posted to a follower's webhook."""
    username: str
    avatar_url: Optional[str] = None
    content: str
    allowed_mentions: AllowedMentions = Field(default_factory=AllowedMentions)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
