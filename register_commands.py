#!/usr/bin/env python3
"""Script to register the Deets commands with Discord."""
import sys
import httpx
from platforms.discord import DiscordClient


def main():
    """Register all commands."""
    client = DiscordClient()

    try:
        registered = client.register_commands()
    except ValueError as e:
        print(f"❌ {e}")
        return 1
    except httpx.HTTPStatusError as e:
        print(f"❌ Discord returned {e.response.status_code}: {e.response.text[:200]}")
        return 1
    except httpx.HTTPError as e:
        print(f"❌ Request failed: {e}")
        return 1

    for command in registered:
        print(f"✅ {command.get('name')}")

    print(f"\nRegistered {len(registered)} commands")
    return 0


if __name__ == "__main__":
    sys.exit(main())
