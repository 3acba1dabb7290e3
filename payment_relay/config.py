from functools import lru_cache
from dotenv import load_dotenv
from pydantic import BaseModel
import os

load_dotenv()


class Settings(BaseModel):
    razorpay_key_id: str = ""
    razorpay_key_secret: str = ""
    razorpay_mock: bool = False

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # "*" keeps the relay open to any browser origin; set CORS_ALLOW_ORIGIN to narrow it
    cors_allow_origin: str = "*"


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    return Settings(
        razorpay_key_id=os.getenv("RAZORPAY_KEY_ID", ""),
        razorpay_key_secret=os.getenv("RAZORPAY_KEY_SECRET", ""),
        razorpay_mock=_env_flag("RAZORPAY_MOCK"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT") or 3000),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_allow_origin=os.getenv("CORS_ALLOW_ORIGIN", "*"),
    )


@lru_cache
def get_settings() -> Settings:
    # read once per process, handlers get it through Depends(get_settings)
    return load_settings()
