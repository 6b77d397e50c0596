"""Broadcast ("deet") fan-out to followers' webhooks."""
from typing import List, Optional
import asyncio
import logging
import httpx
from fastapi.concurrency import run_in_threadpool
from core.context import AppContext
from data.store import read_followers
from models.interactions import CommandData, DeliveryPayload, InteractionResponse, User
from utils.discord_formatter import format_avatar_url, format_display_name

logger = logging.getLogger(__name__)


def build_payload(user: User, content: str) -> DeliveryPayload:
    """Webhook body impersonating the sender, with mention parsing disabled."""
    return DeliveryPayload(
        username=format_display_name(user),
        avatar_url=format_avatar_url(user),
        content=content,
    )


class Broadcaster:
    """Fans one message out to every follower with a registered webhook."""

    def __init__(self, ctx: AppContext):
        self.ctx = ctx
        self.semaphore = asyncio.Semaphore(max(1, ctx.broadcast_concurrency))

    async def send(self, user: User, content: str) -> List[Optional[bool]]:
        """
        Deliver content from user to all followers.

        Returns:
            One entry per follower: None when the follower has no webhook,
            otherwise whether delivery succeeded
        """
        followers = await run_in_threadpool(read_followers, self.ctx.followers, user.id)
        if not followers:
            logger.info(f"{user.id} broadcast with no followers")
            return []

        payload = build_payload(user, content).to_dict()

        async with self.ctx.delivery.client() as client:
            results = await asyncio.gather(*[
                self._deliver_to(client, follower_id, payload)
                for follower_id in followers
            ])

        sent = sum(1 for r in results if r)
        failed = sum(1 for r in results if r is False)
        logger.info(
            f"{user.id} broadcast to {len(followers)} followers: "
            f"{sent} delivered, {failed} failed, {len(followers) - sent - failed} skipped"
        )
        return results

    async def _deliver_to(self, client: httpx.AsyncClient, follower_id: str, payload) -> Optional[bool]:
        url = await run_in_threadpool(self.ctx.webhooks.get, follower_id)
        if not url:
            return None

        async with self.semaphore:
            ok = await self.ctx.delivery.deliver(client, url, payload)
        if not ok:
            logger.warning(f"Broadcast delivery to follower {follower_id} failed")
        return ok


async def send_deet(ctx: AppContext, user: User, data: CommandData) -> InteractionResponse:
    """
    Handle the "deet" chat command.

    The acknowledgement is the same whether or not individual deliveries
    failed; callers cannot observe partial failure.
    """
    content = data.get_string_option("content")
    await Broadcaster(ctx).send(user, content)
    return InteractionResponse.ephemeral("deet sent")
