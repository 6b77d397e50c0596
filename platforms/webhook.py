"""Outbound delivery to follower-registered webhooks."""
from typing import Dict, Any, Optional
import logging
import httpx
import config

logger = logging.getLogger(__name__)


class WebhookDelivery:
    """Posts broadcast payloads to webhook URLs. One attempt, no retries."""

    def __init__(self, timeout: float = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize delivery client.

        Args:
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.timeout = timeout if timeout is not None else config.DELIVERY_TIMEOUT
        self.transport = transport

    def client(self) -> httpx.AsyncClient:
        """Client shared by every delivery of one broadcast."""
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)

    async def deliver(
        self,
        client: httpx.AsyncClient,
        url: str,
        payload: Dict[str, Any]
    ) -> bool:
        """
        Send one payload.

        Args:
            client: Open async client
            url: Follower's webhook URL
            payload: JSON body

        Returns:
            True on a 2xx response; False on any other status or transport error
        """
        try:
            response = await client.post(
                url,
                json=payload,
                headers={"Content-Type": "application/json"}
            )
            if not response.is_success:
                logger.warning(
                    f"Delivery to {url} not OK ({response.status_code}): {response.text[:200]}"
                )
                return False
            return True
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Delivery to {url} failed: {e!r}")
            return False
