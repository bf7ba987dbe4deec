"""Challenge retrieval, login, and encoding-mode detection."""

import enum
import re

import requests

from ..config import CONFIG_JS, LOGIN_LOCKED, LOGIN_OK
from ..exceptions import AccountLocked, ChallengeUnavailable, HttpError, LoginFailed
from ..logging_setup import PasswordFilter, log
from ..session import base_url, goform_get, goform_set, http_get, unix_millis
from .password import DEFAULT_VARIANT, EncodingVariant, select_password_hash

_SHA256_ATTR_RE = re.compile(r"""WEB_ATTR_IF_SUPPORT_SHA256['"\]]*\s*[:=]\s*['"]?(\d+)""")


class LoginOutcome(enum.Enum):
    SUCCESS = "success"
    LOCKED = "locked"
    FAILED = "failed"


def login_result(result) -> LoginOutcome:
    """Map the raw ``result`` field of a LOGIN reply."""
    if result == LOGIN_OK:
        return LoginOutcome.SUCCESS
    if result == LOGIN_LOCKED:
        return LoginOutcome.LOCKED
    return LoginOutcome.FAILED


def fetch_challenge(session: requests.Session, host: str) -> str:
    """
    GET cmd=LD and return the one-time challenge used to salt the
    double-SHA-256 password hash.

    Raises ChallengeUnavailable when the request fails or the reply carries
    no usable LD value.
    """
    try:
        resp = goform_get(session, host, f"isTest=false&cmd=LD&_={unix_millis()}")
        ld = resp.json().get("LD")
    except HttpError as exc:
        log.debug("LD request failed: %s", exc)
        raise ChallengeUnavailable() from exc
    except (ValueError, AttributeError) as exc:
        log.debug("LD reply is not a JSON object: %s", exc)
        raise ChallengeUnavailable() from exc

    if not ld or not isinstance(ld, str):
        raise ChallengeUnavailable()
    log.debug("LD: %s", ld)
    return ld


def login(
    session: requests.Session,
    host: str,
    password: str,
    challenge: str,
    variant: EncodingVariant = DEFAULT_VARIANT,
) -> bool:
    """
    POST goformId=LOGIN with the encoded password.

    Returns True when the router answers result "0".  A locked account
    ("1") and any other code both return False; the former is logged as
    a distinct error.  Non-success HTTP statuses raise HttpError.
    """
    return _login(session, host, password, challenge, variant)[0] is LoginOutcome.SUCCESS


def _login(session, host, password, challenge, variant, redact=None):
    """Returns ``(LoginOutcome, raw result)``."""
    encoded = select_password_hash(password, challenge, variant)
    if redact is not None:
        redact.add(encoded)
    log.debug("Login with variant %s", variant.name)
    resp = goform_set(session, host, {
        "isTest": "false",
        "goformId": "LOGIN",
        "password": encoded,
    })
    try:
        result = resp.json().get("result")
    except (ValueError, AttributeError):
        result = None

    outcome = login_result(result)
    if outcome is LoginOutcome.SUCCESS:
        log.info("Login successful. Active cookies: %s", list(session.cookies.keys()))
    elif outcome is LoginOutcome.LOCKED:
        log.error("Account is locked.")
    else:
        log.error("Login unsuccessful (result=%r).", result)
    return outcome, result


def authenticate(
    session: requests.Session,
    host: str,
    password: str,
    variant: EncodingVariant = DEFAULT_VARIANT,
    redact: PasswordFilter | None = None,
) -> None:
    """
    Run the full challenge/login handshake, raising on any failure.

    When *redact* is given the encoded password is added to it before
    anything is logged.
    """
    challenge = fetch_challenge(session, host)
    outcome, result = _login(session, host, password, challenge, variant, redact)
    if outcome is LoginOutcome.LOCKED:
        raise AccountLocked()
    if outcome is LoginOutcome.FAILED:
        raise LoginFailed(result)


def detect_encoding_variant(session: requests.Session, host: str) -> EncodingVariant | None:
    """
    Fetch the web UI's config.js and read WEB_ATTR_IF_SUPPORT_SHA256.

    Returns None when the file cannot be fetched or does not mention the
    attribute; callers fall back to DEFAULT_VARIANT.
    """
    try:
        resp = http_get(session, base_url(host) + CONFIG_JS)
    except HttpError as exc:
        log.debug("Could not fetch %s: %s", CONFIG_JS, exc)
        return None
    m = _SHA256_ATTR_RE.search(resp.text)
    if not m:
        return None
    variant = EncodingVariant.from_firmware(int(m.group(1)))
    log.debug("WEB_ATTR_IF_SUPPORT_SHA256=%s -> %s", m.group(1), variant.name)
    return variant
