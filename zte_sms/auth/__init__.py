"""Authentication submodule – challenge, login, password encoding."""

from zte_sms.auth.login import (
    LoginOutcome,
    authenticate,
    detect_encoding_variant,
    fetch_challenge,
    login,
    login_result,
)
from zte_sms.auth.password import (
    DEFAULT_VARIANT,
    EncodingVariant,
    select_password_hash,
)

__all__ = [
    "LoginOutcome",
    "authenticate",
    "detect_encoding_variant",
    "fetch_challenge",
    "login",
    "login_result",
    "DEFAULT_VARIANT",
    "EncodingVariant",
    "select_password_hash",
]
