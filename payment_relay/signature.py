import hashlib
import hmac


def generate_signature(order_id: str, payment_id: str, secret: str) -> str:
    # Formula: HMAC_SHA256(order_id + "|" + payment_id, secret), hex encoded
    msg = f"{order_id}|{payment_id}"

    return hmac.new(
        bytes(secret, 'utf-8'),
        bytes(msg, 'utf-8'),
        hashlib.sha256
    ).hexdigest()


def is_valid_signature(order_id: str, payment_id: str, signature: str, secret: str) -> bool:
    generated_signature = generate_signature(order_id, payment_id, secret)
    return hmac.compare_digest(
        bytes(generated_signature, 'utf-8'),
        bytes(signature, 'utf-8')
    )
