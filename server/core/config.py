# server/core/config.py

import os
from dotenv import load_dotenv


load_dotenv()


ACCESS_TOKEN_SECRET = os.getenv("ACCESS_TOKEN_SECRET")
if not ACCESS_TOKEN_SECRET:
    raise RuntimeError(
        "ACCESS_TOKEN_SECRET environment variable is required. "
        "Set it in the environment or in a .env file."
    )

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./app.db")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
