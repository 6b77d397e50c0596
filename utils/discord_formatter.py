"""Discord display formatting utilities."""
from typing import Optional
import config
from models.interactions import User


def format_display_name(user: User) -> str:
    """
    Webhook display name for a user.

    Renders as ``name#discriminator``; payloads without a discriminator
    render as the bare username.
    """
    if user.discriminator:
        return f"{user.username}#{user.discriminator}"
    return user.username


def format_avatar_url(user: User, cdn_url: str = None) -> Optional[str]:
    """CDN URL of the user's avatar, or None if the user has none."""
    if not user.avatar:
        return None
    base = (cdn_url or config.DISCORD_CDN_URL).rstrip('/')
    return f"{base}/avatars/{user.id}/{user.avatar}.png"


def format_user_mention(user_id: str) -> str:
    return f"<@{user_id}>"
