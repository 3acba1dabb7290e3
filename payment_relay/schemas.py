from pydantic import BaseModel, ConfigDict
from typing import Any, Dict, Optional


#------------------------ORDER------------------------
class OrderCreate(BaseModel):
    amount: Optional[float] = None       # major units (rupees)
    orderId: Optional[str] = None        # forwarded as the receipt label
    currency: Optional[str] = None
    notes: Optional[Dict[str, Any]] = None


class OrderEnvelope(BaseModel):
    success: bool
    data: Dict[str, Any]                 # provider order, returned unmodified


#------------------------VERIFICATION------------------------
class PaymentVerification(BaseModel):
    # numeric ids are hashed as their decimal text, e.g. 123 -> "123"
    model_config = ConfigDict(coerce_numbers_to_str=True)

    razorpay_order_id: Optional[str] = None
    razorpay_payment_id: Optional[str] = None
    razorpay_signature: Optional[str] = None


class VerificationEnvelope(BaseModel):
    success: bool
    message: str


#------------------------ERRORS------------------------
class ErrorEnvelope(BaseModel):
    success: bool = False
    error: str
    details: Optional[str] = None


#------------------------STATUS------------------------
class HealthResponse(BaseModel):
    status: str
    timestamp: str
    razorpayInitialized: bool
