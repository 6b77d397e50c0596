"""Webhook registration chat command."""
import logging
from fastapi.concurrency import run_in_threadpool
from core.context import AppContext
from models.interactions import CommandData, InteractionResponse, User

logger = logging.getLogger(__name__)


async def set_webhook(ctx: AppContext, user: User, data: CommandData) -> InteractionResponse:
    """Overwrite the invoking user's delivery URL. The URL is not validated here."""
    url = data.get_string_option("url")
    await run_in_threadpool(ctx.webhooks.put, user.id, url)
    logger.info(f"Webhook set for {user.id}")
    return InteractionResponse.ephemeral("webhook set")
