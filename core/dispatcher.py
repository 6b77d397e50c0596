"""Dispatcher: interaction type → command shape → command handler."""
from typing import Awaitable, Callable, Dict, Union
import inspect
import logging
from core.context import AppContext
from core.errors import MalformedInteractionError, UnknownCommandError, UnknownInteractionTypeError
from core.broadcast import send_deet
from core.follow import follow, unfollow
from core.registration import set_webhook
from models.interactions import (
    ApplicationCommandType,
    CommandData,
    Interaction,
    InteractionResponse,
    InteractionType,
    User,
)

logger = logging.getLogger(__name__)

Handler = Callable[[AppContext, User, CommandData], Union[InteractionResponse, Awaitable[InteractionResponse]]]

USER_COMMANDS: Dict[str, Handler] = {
    "Follow": follow,
    "Unfollow": unfollow,
}

CHAT_INPUT_COMMANDS: Dict[str, Handler] = {
    "deet": send_deet,
    "setwebhook": set_webhook,
}


class InteractionDispatcher:
    """Produces exactly one response per interaction, or raises."""

    def __init__(self, ctx: AppContext):
        """
        Initialize dispatcher.

        Args:
            ctx: Application context (stores, delivery client, public key)
        """
        self.ctx = ctx

    async def dispatch(self, interaction: Interaction) -> InteractionResponse:
        """
        Route an already verified interaction.

        Raises:
            UnknownInteractionTypeError: unhandled interaction or command data type
            UnknownCommandError: unhandled command name
        """
        if interaction.type == InteractionType.PING:
            return InteractionResponse.pong()

        if interaction.type == InteractionType.APPLICATION_COMMAND:
            return await self._handle_application_command(interaction)

        raise UnknownInteractionTypeError(interaction.type)

    async def _handle_application_command(self, interaction: Interaction) -> InteractionResponse:
        data = interaction.data
        if data is None:
            raise MalformedInteractionError("application command has no data")
        user = interaction.invoking_user()

        if data.type == ApplicationCommandType.USER:
            if not data.target_id:
                raise MalformedInteractionError("user command has no target")
            handler = USER_COMMANDS.get(data.name)
            if handler is None:
                raise UnknownCommandError("user command", data.name)
        elif data.type == ApplicationCommandType.CHAT_INPUT:
            handler = CHAT_INPUT_COMMANDS.get(data.name)
            if handler is None:
                raise UnknownCommandError("chat input option", data.name)
        else:
            raise UnknownInteractionTypeError(data.type)

        logger.debug(f"Dispatching {data.name} for {user.id}")
        response = handler(self.ctx, user, data)
        if inspect.isawaitable(response):
            response = await response
        return response
