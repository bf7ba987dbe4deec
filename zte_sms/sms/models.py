"""Typed records for the sms_data_total reply and change detection."""

import enum
from dataclasses import dataclass, field, replace

# Device JSON key (lower-cased) -> SmsMessage attribute
_FIELD_MAP = {
    "id": "id",
    "number": "number",
    "content": "content",
    "tag": "tag",
    "date": "date",
    "draft_group_id": "draft_group_id",
    "draftgroupid": "draft_group_id",
    "received_all_concat_sms": "received_all_concat_sms",
    "receivedallconcatsms": "received_all_concat_sms",
    "concat_sms_total": "concat_sms_total",
    "concatsmstotal": "concat_sms_total",
    "concat_sms_received": "concat_sms_received",
    "concatsmsreceived": "concat_sms_received",
    "sms_class": "sms_class",
    "smsclass": "sms_class",
}


@dataclass(frozen=True)
class SmsMessage:
    id: str
    number: str = ""
    content: str = ""
    tag: str = ""
    date: str = ""
    # concatenated-SMS bookkeeping, passed through untouched
    draft_group_id: str = ""
    received_all_concat_sms: str = ""
    concat_sms_total: str = ""
    concat_sms_received: str = ""
    sms_class: str = ""

    @property
    def numeric_id(self) -> int:
        return int(self.id)

    @classmethod
    def from_dict(cls, data: dict) -> "SmsMessage":
        """
        Build a message from one entry of the ``messages`` array.

        Keys are matched case-insensitively; unknown keys are ignored.
        Raises ValueError when ``id`` is missing or not numeric.
        """
        if not isinstance(data, dict):
            raise ValueError(f"message entry is not an object: {data!r}")
        kwargs = {}
        for key, value in data.items():
            attr = _FIELD_MAP.get(str(key).lower())
            if attr is not None and value is not None:
                kwargs[attr] = str(value)
        if "id" not in kwargs:
            raise ValueError(f"message entry has no id: {data!r}")
        int(kwargs["id"])
        return cls(**kwargs)

    def with_content(self, content: str) -> "SmsMessage":
        return replace(self, content=content)


@dataclass
class MessageList:
    messages: list = field(default_factory=list)

    def __len__(self):
        return len(self.messages)


@dataclass
class MessagesUnavailable:
    """The router reply did not contain a usable message list."""
    reason: str = ""


class ChangeResult(enum.Enum):
    UNCHANGED = "unchanged"
    NEW = "new"
