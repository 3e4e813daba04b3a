import sys
import os

# Add error logging
def log_error(msg):
    """Log startup messages to stderr so they appear in Vercel logs"""
    print(f"[STARTUP] {msg}", file=sys.stderr, flush=True)

try:
    from fastapi import FastAPI
    from fastapi.middleware.cors import CORSMiddleware
    from mangum import Mangum
    from datetime import datetime, timezone

    from api.config import settings
    from api.errors import VerseError, verse_error_handler
    from starlette.exceptions import HTTPException as StarletteHTTPException
    from api.routers import verse

    # Create app
    app = FastAPI(
        title=settings.app_name,
        description="Serverless proxy that turns a feeling into a Bible verse via Gemini",
        version=settings.app_version,
        debug=settings.debug
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Domain errors become {"error": ...} responses
    app.add_exception_handler(VerseError, verse_error_handler)
    # Routing 405s on /api/verse get the same shape
    app.add_exception_handler(StarletteHTTPException, verse.http_exception_handler)

    app.include_router(verse.router)
    log_error("✓ Loaded verse router")

    @app.get("/")
    async def root():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "message": f"{settings.app_name} is running",
            "version": settings.app_version
        }

    @app.get("/api/health")
    async def health_check():
        """Detailed health check"""
        return {
            "status": "healthy",
            "service": "verse-api",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "gemini_configured": bool(settings.gemini_api_key),
            "api_env": settings.api_env,
            "environment": {
                "VERCEL_ENV": os.getenv("VERCEL_ENV"),
                "VERCEL_REGION": os.getenv("VERCEL_REGION"),
            }
        }

    # Vercel handler - this is the entry point
    handler = Mangum(app, lifespan="off")

except Exception as e:
    log_error(f"CRITICAL ERROR during module initialization: {e}")
    import traceback
    log_error(f"Traceback: {traceback.format_exc()}")

    # Create a minimal emergency handler
    from fastapi import FastAPI
    from mangum import Mangum

    error_message = str(e)
    app = FastAPI()

    @app.get("/")
    @app.get("/api/health")
    async def emergency_health():
        return {
            "status": "error",
            "message": f"API failed to initialize: {error_message}"
        }

    handler = Mangum(app, lifespan="off")
