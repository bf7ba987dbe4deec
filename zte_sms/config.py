"""Configuration constants for the ZTE SMS client."""

import os
from pathlib import Path

# The password can also be supplied via the ROUTER_PASSWORD env var
DEFAULT_PASSWORD = os.environ.get("ROUTER_PASSWORD", "")

GOFORM_PATH = "/goform/"
GET_CMD     = "goform_get_cmd_process"
SET_CMD     = "goform_set_cmd_process"
CONFIG_JS   = "/js/config/config.js"    # web UI config, carries WEB_ATTR_IF_SUPPORT_SHA256

# Sent verbatim: the router expects '+' for the spaces in order_by
SMS_LIST_QUERY = (
    "isTest=false&cmd=sms_data_total&page=0&data_per_page=500"
    "&mem_store=1&tags=10&order_by=order+by+id+desc"
)

REQUEST_TIMEOUT = 15    # seconds per HTTP request

# Login 'result' codes returned by goformId=LOGIN
LOGIN_OK     = "0"
LOGIN_LOCKED = "1"

# Only the two most recent inbox slots take part in the change fingerprint
FINGERPRINT_IDS = frozenset({"0", "1"})

# Persistent last-seen fingerprint
STORE_NAMESPACE  = "ZTEStatus"
STORE_VALUE_NAME = "SmsListHash"
REGISTRY_KEY_PATH = r"SOFTWARE\ZTEStatus"
DEFAULT_STATE_FILE = Path(
    os.environ.get(
        "ZTE_SMS_STATE_FILE",
        Path.home() / ".config" / STORE_NAMESPACE / "state.json",
    )
)
