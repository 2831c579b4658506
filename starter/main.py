import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from starter.api.endpoints import payments as payments_api
from starter.api.endpoints import conversations as conversations_api
from starter.core.config import get_settings
from starter.core.errors import (
    AppError,
    app_error_handler,
    request_validation_error_handler,
    unhandled_error_handler,
)

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = FastAPI(title="Starter Lite API", version="0.1.0")

app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)

# Include API routers
app.include_router(payments_api.router, tags=["Payments"])
app.include_router(conversations_api.router, prefix="/conversations", tags=["Conversations"])

@app.get("/ping", tags=["Health Check"])
async def ping():
    return {"message": "pong"}
