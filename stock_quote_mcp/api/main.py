"""FastAPI application main entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stock_quote_mcp.api.errors import register_exception_handlers
from stock_quote_mcp.api.routes import health, mcp
from stock_quote_mcp.tools.registry import tool_registry
from stock_quote_mcp.utils.config import settings
from stock_quote_mcp.utils.logger import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for startup and shutdown."""
    logger.info("Starting Stock Quote MCP server...")
    logger.info(f"AlphaVantage base URL: {settings.alphavantage_base_url}")
    logger.info(f"Tools ready: {', '.join(tool_registry.list_tools())}")

    try:
        yield
    finally:
        logger.info("Shutdown complete")


app = FastAPI(
    title="Stock Quote MCP API",
    description="MCP tools for AlphaVantage stock quotes",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(mcp.router, prefix="/mcp")
app.include_router(health.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "stock_quote_mcp.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
