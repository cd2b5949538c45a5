"""Simple script to run the FastAPI application."""

import uvicorn
from stock_quote_mcp.utils.config import settings

if __name__ == "__main__":
    print(f"Starting server on {settings.host}:{settings.port}", flush=True)

    # String form lets uvicorn bind the port before importing the app
    uvicorn.run(
        "stock_quote_mcp.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
        access_log=True,
        loop="asyncio",
    )
