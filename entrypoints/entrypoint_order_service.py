#!/usr/bin/env python3
# entrypoint_order_service.py
"""
Order Service entrypoint.
Port: settings.deployment.ORDER_SERVICE_PORT (PORT env var, default 8080)
"""

import asyncio
import sys
from pathlib import Path

# Make the project root importable
project_root = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(project_root))

import uvicorn

from src.config import settings
from src.common.logger import log_info
from src.common.constants import TypeMsg


async def main() -> None:
    """Runs the Order Service."""
    await log_info(
        f"Starting Order Service on port {settings.deployment.ORDER_SERVICE_PORT}",
        type_msg=TypeMsg.INFO,
    )

    config = uvicorn.Config(
        "src.services.order_service.app:app",
        host=settings.deployment.ORDER_SERVICE_HOST,
        port=settings.deployment.ORDER_SERVICE_PORT,
        reload=settings.system.DEBUG,
        log_level="debug" if settings.system.DEBUG else "info",
    )

    server = uvicorn.Server(config)
    await server.serve()


if __name__ == "__main__":
    asyncio.run(main())
