"""SMS list retrieval, decoding, and change detection."""

import requests

from ..config import FINGERPRINT_IDS, SMS_LIST_QUERY, STORE_VALUE_NAME
from ..logging_setup import log
from ..session import goform_get, unix_millis
from ..utils.hashing import md5_hex
from ..utils.ucs2 import decode_hex_utf16_payload
from .models import ChangeResult, MessageList, MessagesUnavailable, SmsMessage
from .store import PersistenceSlot


def fetch_capacity_info(session: requests.Session, host: str) -> str:
    """Return the raw sms_capacity_info reply; it is shown, not parsed."""
    resp = goform_get(
        session, host, f"isTest=false&cmd=sms_capacity_info&_={unix_millis()}"
    )
    return resp.text


def parse_message_list(payload) -> MessageList | MessagesUnavailable:
    """
    Turn a decoded sms_data_total reply into a MessageList.

    The ``messages`` key is matched case-insensitively.  A reply of the
    wrong shape yields MessagesUnavailable instead of raising.
    """
    if not isinstance(payload, dict):
        return MessagesUnavailable("reply is not a JSON object")
    raw = next(
        (value for key, value in payload.items() if str(key).lower() == "messages"),
        None,
    )
    if not isinstance(raw, list):
        return MessagesUnavailable("reply has no messages array")
    try:
        messages = [SmsMessage.from_dict(entry) for entry in raw]
    except ValueError as exc:
        return MessagesUnavailable(str(exc))
    return MessageList(messages)


def fetch_message_list(
    session: requests.Session, host: str
) -> MessageList | MessagesUnavailable:
    """
    GET the inbox (newest first, up to 500 entries).

    HTTP failures raise HttpError; a body that is not the expected JSON
    shape comes back as MessagesUnavailable.
    """
    resp = goform_get(session, host, SMS_LIST_QUERY)
    try:
        payload = resp.json()
    except ValueError as exc:
        log.debug("sms_data_total reply is not JSON: %s", exc)
        return MessagesUnavailable("reply is not JSON")
    result = parse_message_list(payload)
    if isinstance(result, MessagesUnavailable):
        log.debug("Messages unavailable: %s", result.reason)
    else:
        log.debug("Fetched %d messages", len(result))
    return result


def present(messages) -> list[SmsMessage]:
    """Sort by ascending numeric id and decode each UCS2 body."""
    return [
        m.with_content(decode_hex_utf16_payload(m.content))
        for m in sorted(messages, key=lambda m: m.numeric_id)
    ]


def compute_fingerprint(messages) -> str:
    """
    MD5 over content + date of the two most recent inbox slots.

    Messages are taken in the order received (the query already sorts
    newest first).  Entries with any other id never affect the result.
    """
    window = "".join(
        m.content + m.date for m in messages if m.id in FINGERPRINT_IDS
    )
    return md5_hex(window)


def detect_and_record_change(fingerprint: str, slot: PersistenceSlot) -> ChangeResult:
    """Compare against the stored fingerprint, storing the new one if it differs."""
    saved = slot.get(STORE_VALUE_NAME)
    log.debug("Fingerprint current=%s saved=%s", fingerprint, saved)
    if fingerprint == saved:
        return ChangeResult.UNCHANGED
    slot.set(STORE_VALUE_NAME, fingerprint)
    return ChangeResult.NEW


def sync_messages(session: requests.Session, host: str):
    """
    Fetch, decode, and fingerprint the inbox.

    Returns ``(presented_messages, fingerprint)`` or a MessagesUnavailable
    marker.  Recording the fingerprint is left to the caller so the inbox
    can be shown before the store is touched.
    """
    result = fetch_message_list(session, host)
    if isinstance(result, MessagesUnavailable):
        return result
    try:
        shown = present(result.messages)
    except ValueError as exc:
        log.debug("Could not decode message content: %s", exc)
        return MessagesUnavailable("undecodable message content")
    # Fingerprint the raw content so the stored value stays comparable
    return shown, compute_fingerprint(result.messages)
