"""
zte_sms
=======
Log in to a ZTE router's web interface (goform API), list the SMS inbox,
and report when new messages have arrived since the previous run.

Package structure
-----------------
zte_sms/
├── __init__.py       – package init and public API
├── config.py         – configuration constants
├── exceptions.py     – error taxonomy
├── logging_setup.py  – colorlog setup and password redaction
├── session.py        – requests.Session factory and goform helpers
├── runner.py         – the end-to-end run
├── cli.py            – argparse CLI (``python -m zte_sms``)
├── utils/            – SHA-256 / MD5 / Base64 and UCS2 decoding
├── auth/             – LD challenge, password encodings, LOGIN
└── sms/              – inbox models, fingerprint store, sync

Quick start
-----------
    from zte_sms import JsonFileStore, run

    run("192.168.0.1", "your_password", JsonFileStore())
"""

from .auth import EncodingVariant, authenticate, fetch_challenge, login, select_password_hash
from .runner import run
from .session import build_session
from .sms import (
    ChangeResult,
    JsonFileStore,
    MemoryStore,
    SmsMessage,
    compute_fingerprint,
    detect_and_record_change,
    fetch_message_list,
    present,
)

__all__ = [
    "EncodingVariant",
    "authenticate",
    "fetch_challenge",
    "login",
    "select_password_hash",
    "run",
    "build_session",
    "ChangeResult",
    "JsonFileStore",
    "MemoryStore",
    "SmsMessage",
    "compute_fingerprint",
    "detect_and_record_change",
    "fetch_message_list",
    "present",
]
