import pytest

from payment_relay.config import Settings, get_settings, load_settings
from payment_relay.main import app

ENV_KEYS = [
    "RAZORPAY_KEY_ID",
    "RAZORPAY_KEY_SECRET",
    "RAZORPAY_MOCK",
    "HOST",
    "PORT",
    "LOG_LEVEL",
    "CORS_ALLOW_ORIGIN",
]


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = load_settings()

    assert settings.razorpay_key_id == ""
    assert settings.razorpay_key_secret == ""
    assert settings.razorpay_mock is False
    assert settings.host == "0.0.0.0"
    assert settings.port == 3000
    assert settings.log_level == "INFO"
    assert settings.cors_allow_origin == "*"


def test_reads_environment(clean_env):
    clean_env.setenv("RAZORPAY_KEY_ID", "rzp_live_abc")
    clean_env.setenv("RAZORPAY_KEY_SECRET", "s3cret")
    clean_env.setenv("PORT", "8080")
    clean_env.setenv("LOG_LEVEL", "debug")
    clean_env.setenv("CORS_ALLOW_ORIGIN", "https://postsync.app")

    settings = load_settings()

    assert settings.razorpay_key_id == "rzp_live_abc"
    assert settings.razorpay_key_secret == "s3cret"
    assert settings.port == 8080
    assert settings.log_level == "DEBUG"
    assert settings.cors_allow_origin == "https://postsync.app"


def test_empty_port_falls_back_to_default(clean_env):
    clean_env.setenv("PORT", "")
    assert load_settings().port == 3000


@pytest.mark.parametrize("value,expected", [
    ("true", True),
    ("1", True),
    ("YES", True),
    (" on ", True),
    ("false", False),
    ("0", False),
    ("", False),
])
def test_mock_flag_parsing(clean_env, value, expected):
    clean_env.setenv("RAZORPAY_MOCK", value)
    assert load_settings().razorpay_mock is expected


def test_narrowed_origin_reaches_headers_and_cors_echo(client):
    app.dependency_overrides[get_settings] = lambda: Settings(cors_allow_origin="https://postsync.app")

    res = client.get("/test-cors")
    preflight = client.options("/api/razorpay-order")

    assert res.headers["access-control-allow-origin"] == "https://postsync.app"
    assert res.json()["headers"]["allowOrigin"] == "https://postsync.app"
    assert preflight.headers["access-control-allow-origin"] == "https://postsync.app"
