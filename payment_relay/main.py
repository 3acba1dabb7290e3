from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from .config import get_settings
from .cors import cors_middleware
from .exceptions import RelayError, ValidationError
from .routers import health, payment
from .routers.health import utc_timestamp
import logging
import uvicorn

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


app = FastAPI(title="PostSync Payment API")

app.middleware("http")(cors_middleware)

app.include_router(health.router)
app.include_router(payment.router)


@app.exception_handler(RelayError)
async def relay_error_handler(request: Request, exc: RelayError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # malformed JSON or wrong field types, answered with the same envelope as a missing field
    first = exc.errors()[0] if exc.errors() else {}
    error = ValidationError("Invalid request body", details=first.get("msg"))
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.get("/")
def root():
    return {
        "name": "PostSync Payment API",
        "status": "online",
        "endpoints": {
            "health": "/health",
            "razorpayOrder": "/api/razorpay-order",
            "razorpayVerify": "/api/razorpay-verify"
        },
        "timestamp": utc_timestamp()
    }


def run():
    logger.info("Server running on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
