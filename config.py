"""Configuration module for the Deets relay."""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Discord application
DISCORD_PUBLIC_KEY = os.getenv("DISCORD_PUBLIC_KEY", "")
DISCORD_CLIENT_ID = os.getenv("DISCORD_CLIENT_ID", "")
DISCORD_CLIENT_SECRET = os.getenv("DISCORD_CLIENT_SECRET", "")
DISCORD_API_URL = os.getenv("DISCORD_API_URL", "https://discord.com/api/v10")
DISCORD_CDN_URL = os.getenv("DISCORD_CDN_URL", "https://cdn.discordapp.com")

# Database
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///deets.db")

# Broadcast delivery
DELIVERY_TIMEOUT = float(os.getenv("DELIVERY_TIMEOUT", "10"))
BROADCAST_CONCURRENCY = int(os.getenv("BROADCAST_CONCURRENCY", "10"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Server
PORT = int(os.getenv("PORT", "8000"))
