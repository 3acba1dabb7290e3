import time
import uuid


# --- THE FAKE BANK (Simulation Layer) ---
# Mimics the order API of the 'razorpay' SDK, so the service can create
# orders locally without real credentials (RAZORPAY_MOCK=true).
class MockRazorpayClient:
    def __init__(self, auth):
        self.key_id = auth[0]
        self.key_secret = auth[1]
        self.order = self.Order(self)      # client.order.create

    class Order:
        def __init__(self, client):
            self.client = client

        def create(self, data):
            # Simulate generating a random Order ID like Razorpay does
            fake_id = f"order_{uuid.uuid4().hex[:14]}"
            return {
                "id": fake_id,
                "entity": "order",
                "amount": data["amount"],
                "amount_paid": 0,
                "amount_due": data["amount"],
                "currency": data["currency"],
                "receipt": data.get("receipt"),
                "notes": data.get("notes", {}),
                "status": "created",
                "attempts": 0,
                "created_at": int(time.time()),
            }
