# app/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import get_settings
from app.core.errors import TicketFlowError
from app.core.logging_config import setup_logging
from app.action.routes import router as action_router
from app.auth.routes import router as auth_router
from app.page.routes import router as page_router
from app.ticket.routes import router as ticket_router

settings = get_settings()
setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESC,
    version=settings.APP_VERSION,
)

# Credentials (the session cookie) cannot be combined with a wildcard origin
origins = settings.cors_origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials="*" not in origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TicketFlowError)
async def ticketflow_error_handler(request: Request, exc: TicketFlowError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# Routers
app.include_router(action_router)
app.include_router(page_router)
app.include_router(auth_router)
app.include_router(ticket_router)

logger.info("%s %s ready", settings.APP_NAME, settings.APP_VERSION)


@app.get("/health", tags=["Health"])
def health():
    return {"status": "ok"}
