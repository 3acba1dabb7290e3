import sys
import uuid
from payment_relay.config import load_settings
from payment_relay.signature import generate_signature

# Uses the same RAZORPAY_KEY_SECRET the relay reads (env or .env)
KEY_SECRET = load_settings().razorpay_key_secret

if len(sys.argv) < 2:
    sys.exit("usage: python generate_fake_signature.py <order_id> [payment_id]")

# 1. The Order ID you got from /api/razorpay-order
ORDER_ID = sys.argv[1]

# 2. Reuse a payment id or make one up
PAYMENT_ID = sys.argv[2] if len(sys.argv) > 2 else f"pay_fake_{uuid.uuid4().hex[:10]}"

# 3. Generate the Signature
signature = generate_signature(ORDER_ID, PAYMENT_ID, KEY_SECRET)

print("--- COPY THESE INTO POSTMAN /api/razorpay-verify ---")
print(f'"razorpay_order_id": "{ORDER_ID}",')
print(f'"razorpay_payment_id": "{PAYMENT_ID}",')
print(f'"razorpay_signature": "{signature}"')
