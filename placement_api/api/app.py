from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from placement_api.adapter.services.smtp_mail_sender import SmtpMailSender
from placement_api.app.services.mail_sender import IMailSender
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    logger.warning(
        f"Client error on {request.method} {request.url.path}: "
        f"{exc.base_error.code} ({exc.base_error.message})"
    )
    return JSONResponse(status_code=exc.status_code, content=exc.body())


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code} ({exc.base_error.message})")
    return JSONResponse(status_code=exc.status_code, content=exc.body())


async def handle_store_error(request: Request, exc: SQLAlchemyError):
    logger.error(f"Store error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": {"code": "STORE_ERROR", "message": "Internal server error"}},
    )


def create_app(ApplicationConfig, mail_sender: Optional[IMailSender] = None) -> FastAPI:
    app = FastAPI(title="Internship Allotment API", version="0.1.0")

    # Process-wide collaborators live on app.state, not in the components using them
    app.state.mail_sender = mail_sender or SmtpMailSender.from_config(ApplicationConfig)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from placement_api.api.routes import auth, confirmation, health_check, organization

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(confirmation.router, tags=["Reset Confirmation"])
    app.include_router(auth.router, prefix=ApplicationConfig.API_PREFIX, tags=["Authentication"])
    app.include_router(
        organization.router, prefix=ApplicationConfig.API_PREFIX, tags=["Organization"]
    )

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(SQLAlchemyError, handle_store_error)

    return app
