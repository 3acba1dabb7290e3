from functools import lru_cache
import logging

import razorpay

from .config import get_settings
from .mockGateway import MockRazorpayClient

logger = logging.getLogger(__name__)


def build_client(settings):
    auth = (settings.razorpay_key_id, settings.razorpay_key_secret)

    if settings.razorpay_mock:
        logger.warning("RAZORPAY_MOCK is set, orders are created by the in-process mock gateway")
        return MockRazorpayClient(auth=auth)

    # Constructing the SDK client never talks to the network, so empty keys only fail on first use
    return razorpay.Client(auth=auth)


@lru_cache
def get_payment_client():
    # created once per process and never mutated afterwards
    return build_client(get_settings())
