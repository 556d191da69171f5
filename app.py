"""FastAPI application entry point."""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import logging
import config
from middleware.logging import configure_logging
from routes import webhook, health

configure_logging(config.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Slack Driver",
    description="Slack webhook normalization and reply service",
    version="1.0.0"
)


# Error handlers
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    # In production, hide error details
    if config.ENVIRONMENT.lower() == "production":
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"}
        )
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "detail": str(exc)}
    )


# Include routers
app.include_router(health.router, tags=["health"])
app.include_router(webhook.router, tags=["webhooks"])


if __name__ == "__main__":
    import uvicorn
    import os
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)
