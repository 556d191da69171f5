"""Health check routes."""
from fastapi import APIRouter
import config

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check."""
    return {
        "status": "ok",
        "service": "slack-driver",
        "slack_token_configured": bool(config.SLACK_TOKEN)
    }
