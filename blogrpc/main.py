import logging
from contextlib import asynccontextmanager

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI, HTTPException
from fastapi.exception_handlers import http_exception_handler

import sentry_sdk

from blogrpc.config import config
from blogrpc.log_config import configure_logging
from blogrpc.bootstrap import get_message_bus

from blogrpc.entrypoints.routers.xmlrpc import router as xmlrpc_router

if config.SENTRY_DSN:
    sentry_sdk.init(
        dsn=config.SENTRY_DSN,
        send_default_pii=False,
    )

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info(f"Accepting XML-RPC calls on {config.XMLRPC_PATH}")
    yield

app = FastAPI(lifespan=lifespan)

app.add_middleware(CorrelationIdMiddleware)

# initialize global message bus singleton
get_message_bus()

app.include_router(xmlrpc_router)

@app.exception_handler(HTTPException)
async def http_exception_handle_logging(request, exc):
    logger.error(f"HTTPException: {exc.status_code} {exc.detail}")
    return await http_exception_handler(request, exc)

@app.get("/")
async def root():
    return {"message": "Server is running"}
