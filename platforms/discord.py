"""Discord REST client for registering the application's commands."""
from typing import Dict, Any, List, Optional
import logging
import httpx
import config
from models.interactions import ApplicationCommandType, CommandOptionType

logger = logging.getLogger(__name__)

COMMANDS: List[Dict[str, Any]] = [
    {
        "name": "Follow",
        "type": ApplicationCommandType.USER,
    },
    {
        "name": "Unfollow",
        "type": ApplicationCommandType.USER,
    },
    {
        "name": "deet",
        "type": ApplicationCommandType.CHAT_INPUT,
        "description": "Send a deet to everyone following you",
        "options": [
            {
                "name": "content",
                "description": "What to say",
                "type": CommandOptionType.STRING,
                "required": True,
            }
        ],
    },
    {
        "name": "setwebhook",
        "type": ApplicationCommandType.CHAT_INPUT,
        "description": "Set the webhook your followed users' deets are delivered to",
        "options": [
            {
                "name": "url",
                "description": "Discord webhook URL",
                "type": CommandOptionType.STRING,
                "required": True,
            }
        ],
    },
]


class DiscordClient:
    """Client-credentials client for the Discord REST API."""

    def __init__(
        self,
        client_id: str = None,
        client_secret: str = None,
        api_url: str = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self.client_id = client_id if client_id is not None else config.DISCORD_CLIENT_ID
        self.client_secret = client_secret if client_secret is not None else config.DISCORD_CLIENT_SECRET
        self.api_url = (api_url or config.DISCORD_API_URL).rstrip('/')
        self.transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(timeout=10.0, transport=self.transport)

    def get_access_token(self) -> str:
        """
        Obtain a bearer token via the client-credentials grant.

        Raises:
            ValueError: credentials not configured
            httpx.HTTPStatusError: token endpoint rejected the credentials
        """
        if not self.client_id or not self.client_secret:
            raise ValueError("DISCORD_CLIENT_ID and DISCORD_CLIENT_SECRET must be set")

        with self._client() as client:
            response = client.post(
                f"{self.api_url}/oauth2/token",
                data={
                    "grant_type": "client_credentials",
                    "scope": "applications.commands.update",
                },
                auth=(self.client_id, self.client_secret)
            )
            response.raise_for_status()
            return response.json()["access_token"]

    def register_commands(self, commands: List[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """
        Bulk-overwrite the application's global commands.

        Returns:
            Commands as registered by Discord
        """
        token = self.get_access_token()
        body = [dict(c) for c in (commands if commands is not None else COMMANDS)]

        with self._client() as client:
            response = client.put(
                f"{self.api_url}/applications/{self.client_id}/commands",
                json=body,
                headers={"Authorization": f"Bearer {token}"}
            )
            response.raise_for_status()
            registered = response.json()

        logger.info(f"Registered {len(registered)} commands for application {self.client_id}")
        return registered
