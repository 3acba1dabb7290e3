from fastapi import APIRouter, Depends, Request
from datetime import datetime, timezone
from .. import schemas
from ..config import Settings, get_settings
from ..cors import cors_headers
from ..gateway import get_payment_client
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Status"])


def utc_timestamp() -> str:
    # ISO 8601 with millisecond precision, e.g. 2024-05-01T10:00:00.000Z
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/health", response_model=schemas.HealthResponse)
def health(client = Depends(get_payment_client)):
    # only says the client object exists, not that the keys are accepted by Razorpay
    return {
        "status": "ok",
        "timestamp": utc_timestamp(),
        "razorpayInitialized": client is not None
    }


@router.get("/test-cors")
def test_cors(request: Request, settings: Settings = Depends(get_settings)):
    logger.info("CORS test request received, origin: %s", request.headers.get("origin"))
    headers = cors_headers(settings)

    return {
        "message": "CORS test successful",
        "headers": {
            "allowOrigin": headers["Access-Control-Allow-Origin"],
            "allowMethods": headers["Access-Control-Allow-Methods"],
            "allowHeaders": headers["Access-Control-Allow-Headers"]
        },
        "requestHeaders": dict(request.headers)
    }
