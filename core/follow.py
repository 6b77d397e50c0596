"""Follow / unfollow user commands."""
import logging
from fastapi.concurrency import run_in_threadpool
from core.context import AppContext
from data.store import add_follower, remove_follower
from models.interactions import CommandData, InteractionResponse, User
from utils.discord_formatter import format_user_mention

logger = logging.getLogger(__name__)


async def follow(ctx: AppContext, user: User, data: CommandData) -> InteractionResponse:
    """Add the invoking user to the target's follower set."""
    target_id = data.target_id
    await run_in_threadpool(add_follower, ctx.followers, target_id, user.id)
    logger.info(f"{user.id} followed {target_id}")
    return InteractionResponse.ephemeral(f"followed {format_user_mention(target_id)}!")


async def unfollow(ctx: AppContext, user: User, data: CommandData) -> InteractionResponse:
    """Remove the invoking user from the target's follower set. Absent ids are a no-op."""
    target_id = data.target_id
    await run_in_threadpool(remove_follower, ctx.followers, target_id, user.id)
    logger.info(f"{user.id} unfollowed {target_id}")
    return InteractionResponse.ephemeral(f"unfollowed {format_user_mention(target_id)}!")
