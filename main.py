"""Serve the product catalog API with uvicorn.

Usage:
    python main.py

Host and port are read from API_HOST and API_PORT (defaults 127.0.0.1:8000).
The config file is selected by APP_ENV (see product_catalog.config).
"""

import os

import uvicorn
from dotenv import load_dotenv

from product_catalog.api import create_app

load_dotenv()


if __name__ == "__main__":
    uvicorn.run(
        create_app(),
        host=os.getenv("API_HOST", "127.0.0.1"),
        port=int(os.getenv("API_PORT", "8000")),
    )
