"""SMS submodule – inbox retrieval, decoding, change detection."""

from zte_sms.sms.models import (
    ChangeResult,
    MessageList,
    MessagesUnavailable,
    SmsMessage,
)
from zte_sms.sms.store import JsonFileStore, MemoryStore, PersistenceSlot, RegistryStore
from zte_sms.sms.sync import (
    compute_fingerprint,
    detect_and_record_change,
    fetch_capacity_info,
    fetch_message_list,
    parse_message_list,
    present,
    sync_messages,
)

__all__ = [
    "ChangeResult",
    "MessageList",
    "MessagesUnavailable",
    "SmsMessage",
    "JsonFileStore",
    "MemoryStore",
    "PersistenceSlot",
    "RegistryStore",
    "compute_fingerprint",
    "detect_and_record_change",
    "fetch_capacity_info",
    "fetch_message_list",
    "parse_message_list",
    "present",
    "sync_messages",
]
