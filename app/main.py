from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.api import shortener
from app.core.logging_config import configure_logging

logger = configure_logging(settings.LOG_LEVEL)
logger.info(f"Application '{settings.PROJECT_NAME}' starting up.")
logger.info(f"Short URLs will use base URL {settings.BASE_URL}")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Random Base62 URL Shortener Service"
)

app.include_router(shortener.router, prefix="")

@app.get("/health", tags=["health"])
def health_check():
    return {"status": "healthy", "service": "url-shortener"}

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})
