"""
Sequential run: challenge → login → capacity → inbox → change check.

Data goes to *out* (stdout by default); diagnostics go to the logger.
Any failure aborts the remaining steps, except an unusable message list,
which is reported and treated as "nothing to show".
"""

import sys

import requests

from .auth.login import authenticate
from .auth.password import DEFAULT_VARIANT, EncodingVariant
from .exceptions import ChallengeUnavailable, LoginError
from .logging_setup import PasswordFilter, log
from .session import build_session
from .sms.models import ChangeResult, MessagesUnavailable
from .sms.store import PersistenceSlot
from .sms.sync import detect_and_record_change, fetch_capacity_info, sync_messages


def render_message(message) -> str:
    return (
        f"ID: {message.id}\n"
        f"Number: {message.number}\n"
        f"Content: {message.content}\n"
        f"Tag: {message.tag}\n"
        f"Date: {message.date}\n"
    )


def run(
    host: str,
    password: str,
    slot: PersistenceSlot,
    variant: EncodingVariant = DEFAULT_VARIANT,
    session: requests.Session | None = None,
    out=None,
) -> int:
    """
    Log in to the router at *host* and report its SMS inbox.

    Returns 0 when the sequence completed (an unavailable message list
    included) and 1 when it was aborted.
    """
    out = out or sys.stdout
    session = session or build_session(host)
    redact = PasswordFilter(password)
    log.addFilter(redact)
    try:
        authenticate(session, host, password, variant, redact)

        capacity = fetch_capacity_info(session, host)
        print(f"SMS Capacity Response: {capacity}", file=out)

        result = sync_messages(session, host)
        if isinstance(result, MessagesUnavailable):
            print("Messages are not available.", file=out)
            return 0

        messages, fingerprint = result
        for message in messages:
            print(render_message(message), file=out)
        if detect_and_record_change(fingerprint, slot) is ChangeResult.NEW:
            print("New messages detected.", file=out)
        return 0
    except (ChallengeUnavailable, LoginError) as exc:
        print(str(exc), file=out)
        return 1
    except Exception as exc:
        log.debug("Run aborted", exc_info=True)
        print(f"Error: {exc}", file=out)
        return 1
    finally:
        log.removeFilter(redact)
