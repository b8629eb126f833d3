from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from typing import Optional
import logging

from config.settings import Settings, settings
from core.state import CredentialStore
from routes import auth, protected
from services.auth_service import CredentialService
from utils.errors import AuthError, auth_error_handler
from utils.security import TokenGate

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application around one settings object.

    The credential store, token gate and credential service are created
    here and shared through ``app.state``.
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title=app_settings.API_TITLE,
        version=app_settings.API_VERSION,
        description="Username/password login issuing bearer tokens",
        docs_url="/docs",
        openapi_url="/openapi.json"
    )

    store = CredentialStore()
    token_gate = TokenGate.from_settings(app_settings)
    app.state.settings = app_settings
    app.state.store = store
    app.state.token_gate = token_gate
    app.state.credential_service = CredentialService(store, token_gate, app_settings)

    # ============ CORS Middleware ============

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AuthError, auth_error_handler)

    # ============ Event Handlers ============

    @app.on_event("startup")
    async def startup_event():
        """
        Initialize application on startup.
        - Preload the demo account
        - Log startup info
        """
        try:
            await app.state.credential_service.bootstrap()
            logger.info("✅ Application started successfully")
            logger.info(f"📊 API docs available at: http://localhost:{app_settings.PORT}/docs")
        except Exception as e:
            logger.error(f"❌ Failed to start application: {str(e)}")
            raise

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("❌ Application shutdown")

    # ============ Health Check ============

    @app.get("/health", tags=["health"])
    async def health_check():
        """
        Health check endpoint.
        Returns application status.
        """
        return {
            "status": "healthy",
            "service": app_settings.API_TITLE,
            "version": app_settings.API_VERSION
        }

    # ============ Root Endpoint ============

    @app.get("/", include_in_schema=False)
    async def root():
        """Serve the static login page."""
        login_page = app_settings.STATIC_DIR / "login.html"
        if not login_page.is_file():
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Login page not found")
        return FileResponse(login_page)

    # ============ Include Routers ============

    app.include_router(auth.router)
    app.include_router(protected.router)

    # Registered last so API routes take precedence over asset paths
    if app_settings.STATIC_DIR.is_dir():
        app.mount("/", StaticFiles(directory=app_settings.STATIC_DIR), name="static")
    else:
        logger.warning(f"Static directory not found: {app_settings.STATIC_DIR}")

    logger.info("✅ All routers registered")
    return app


app = create_app(settings)

# ============ Run Application ============

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting server on {settings.HOST}:{settings.PORT}")

    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower()
    )
