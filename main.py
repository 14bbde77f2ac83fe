import logging
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import Settings, load_settings
from mailer import MailTransport, SmtpTransport, compose_contact_mail
from models.contactrequest import RelayRequest, RelayResult
from portfolio import FILTERS, PROJECTS, filter_projects

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

MESSAGE_SENT = "Message sent successfully!"
METHOD_NOT_ALLOWED = "Method not allowed"
SEND_FAILED = "Failed to send message."

CONTACT_PATH = "/api/contact"


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_transport(request: Request) -> MailTransport:
    return request.app.state.transport


async def _read_json(request: Request):
    try:
        return await request.json()
    except ValueError:
        return None


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[MailTransport] = None,
) -> FastAPI:
    """Build the relay app.

    Settings are loaded here, once, so a missing credential stops the process
    before any route exists. The transport is built once and shared by every
    request through `get_transport`.
    """
    if settings is None:
        settings = load_settings()
    if transport is None:
        transport = SmtpTransport(
            username=settings.EMAIL_USER,
            password=settings.EMAIL_PASS,
            hostname=settings.SMTP_SERVER,
            port=settings.SMTP_PORT,
        )

    app = FastAPI(title="Portfolio Contact API", version="1.0.0")
    app.state.settings = settings
    app.state.transport = transport

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(f"Request: {request.method} {request.url.path}")
        response = await call_next(request)
        logger.info(f"Response status: {response.status_code}")
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.error(f"Validation Error: {exc.errors()}")
        return JSONResponse(status_code=422, content={"detail": exc.errors()})

    @app.exception_handler(StarletteHTTPException)
    async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
        # Any method but POST on the relay gets the relay's own JSON body
        if exc.status_code == 405 and request.url.path == CONTACT_PATH:
            return JSONResponse(
                status_code=405,
                content={"message": METHOD_NOT_ALLOWED},
                headers=exc.headers,
            )
        return await http_exception_handler(request, exc)

    # API route relaying the contact form to the site owner's inbox
    @app.post(CONTACT_PATH, response_model=RelayResult)
    async def contact(
        request: Request,
        settings: Settings = Depends(get_settings),
        transport: MailTransport = Depends(get_transport),
    ):
        submission = RelayRequest.from_payload(await _read_json(request))

        try:
            mail = compose_contact_mail(submission, settings.EMAIL_TO)
            await transport.send(mail)
        except Exception as e:
            logger.error(f"Email failed: {e}", exc_info=True)
            return JSONResponse(status_code=500, content={"message": SEND_FAILED})

        return {"message": MESSAGE_SENT}

    # Project gallery, filtered by technology tag
    @app.get("/api/projects")
    async def projects(tag: Optional[str] = None):
        return {
            "filters": FILTERS,
            "projects": [p.model_dump() for p in filter_projects(PROJECTS, tag)],
        }

    # Root endpoint for testing
    @app.get("/")
    async def root():
        return {"message": "Welcome to the Portfolio Contact API"}

    logger.info(f"✅ Loaded {len(app.routes)} routes")
    return app


def run(host: str = "0.0.0.0", port: int = 10000, reload: bool = True):
    # Check the configuration in this process, before uvicorn binds the socket
    load_settings()
    uvicorn.run("main:create_app", factory=True, host=host, port=port, reload=reload)


if __name__ == "__main__":
    run()
