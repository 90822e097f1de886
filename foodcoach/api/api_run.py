from fastapi import FastAPI
import logging

from foodcoach.ai.providers import select_provider
from foodcoach.utilities.config import DEBUG

# Routers
from foodcoach.api.routes import chat, labs, plan

# Logging
logger = logging.getLogger("foodcoach_app")
logging.basicConfig(level=logging.DEBUG if DEBUG else logging.INFO)

# Initialize FastAPI app
app = FastAPI(title="Food is My Medicine API")

# Include routers
app.include_router(chat.router)
app.include_router(labs.router)
app.include_router(plan.router)


@app.on_event("startup")
def _log_provider():
    """Report which backend would serve requests; selection is still re-checked per call."""
    provider = select_provider()
    if provider is None:
        logger.warning("No AI provider key configured; AI endpoints will return 503 until one is set.")
    else:
        logger.info("AI provider available: %s", provider)


@app.get("/health")
def health_check():
    return {"status": "ok", "provider": select_provider()}
