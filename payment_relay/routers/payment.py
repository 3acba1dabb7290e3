from fastapi import APIRouter, Depends, status
from typing import Optional
from .. import schemas
from ..config import Settings, get_settings
from ..exceptions import RelayError, UpstreamError, ValidationError, VerificationMismatch
from ..gateway import get_payment_client
from ..signature import is_valid_signature
import json
import logging
import math

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Payments"])

DEFAULT_CURRENCY = "INR"

# Razorpay accepts at most 15 notes, 256 characters each
MAX_NOTES = 15
MAX_NOTE_LENGTH = 256

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": schemas.ErrorEnvelope},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": schemas.ErrorEnvelope},
}


def to_minor_units(amount: float) -> int:
    # Razorpay expects amount in paisa
    return int(round(amount * 100))


def check_notes(notes: dict):
    if len(notes) > MAX_NOTES:
        raise ValidationError("Too many notes", details=f"At most {MAX_NOTES} notes are allowed")

    for key, value in notes.items():
        text = value if isinstance(value, str) else json.dumps(value)
        if len(key) > MAX_NOTE_LENGTH or len(text) > MAX_NOTE_LENGTH:
            raise ValidationError("Note too long", details=f"Note '{key[:32]}' exceeds {MAX_NOTE_LENGTH} characters")


# --- ACT 1: CREATE ORDER ---
@router.post("/razorpay-order", response_model=schemas.OrderEnvelope, responses=ERROR_RESPONSES)
def create_order(request: Optional[schemas.OrderCreate] = None, client = Depends(get_payment_client)):
    request = request or schemas.OrderCreate()

    if not request.amount:
        raise ValidationError("Amount is required")

    # NaN, Infinity and values that overflow once scaled to paisa
    if not math.isfinite(request.amount * 100):
        raise ValidationError("Amount must be a finite number")

    amount_paise = to_minor_units(request.amount)
    if amount_paise < 1:
        raise ValidationError("Amount must be positive")

    notes = request.notes or {}
    check_notes(notes)

    options = {
        "amount": amount_paise,
        "currency": request.currency or DEFAULT_CURRENCY,
        "receipt": request.orderId,
        "notes": notes
    }

    # Network call to the provider, no retry on failure
    try:
        logger.info("Creating Razorpay order with options: %s", json.dumps(options, default=str))
        order = client.order.create(data=options)
        logger.info("Razorpay order created: %s", json.dumps(order, default=str))
    except Exception as e:
        logger.error("Error creating order: %s", e)
        raise UpstreamError("Failed to create order", details=str(e) or "Unknown error")

    return {"success": True, "data": order}


# --- ACT 2: VERIFY PAYMENT ---
@router.post("/razorpay-verify", response_model=schemas.VerificationEnvelope, responses=ERROR_RESPONSES)
def verify_payment(request: Optional[schemas.PaymentVerification] = None, settings: Settings = Depends(get_settings)):
    request = request or schemas.PaymentVerification()

    if not request.razorpay_order_id or not request.razorpay_payment_id or not request.razorpay_signature:
        raise ValidationError("Missing required parameters")

    try:
        valid = is_valid_signature(
            request.razorpay_order_id,
            request.razorpay_payment_id,
            request.razorpay_signature,
            settings.razorpay_key_secret
        )
    except Exception as e:
        logger.error("Error verifying payment: %s", e)
        raise RelayError("Failed to verify payment", details=str(e) or "Unknown error")

    if not valid:
        logger.info("Signature mismatch for order %s", request.razorpay_order_id)
        raise VerificationMismatch("Invalid signature")

    return {"success": True, "message": "Payment verified successfully"}
