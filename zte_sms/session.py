"""HTTP session management and goform command helpers."""

import time

import requests

from .config import GET_CMD, GOFORM_PATH, REQUEST_TIMEOUT, SET_CMD
from .exceptions import HttpError
from .logging_setup import log


def build_session(host: str) -> requests.Session:
    """
    Return a requests.Session pre-configured for the router web UI.

    The goform handlers reject requests without a Referer pointing at the
    router itself.  Cookies set by the login call persist in the session jar
    and authenticate every later request.
    """
    session = requests.Session()
    session.headers.update({
        "Referer": f"http://{host}/",
        "Accept": "application/json, text/javascript, */*; q=0.01",
        "X-Requested-With": "XMLHttpRequest",
    })
    return session


def base_url(host: str) -> str:
    return f"http://{host}"


def goform_url(host: str) -> str:
    """'http://192.168.0.1/goform/'"""
    return base_url(host) + GOFORM_PATH


def unix_millis() -> int:
    """Cache-busting timestamp used as the '_' query parameter."""
    return int(time.time() * 1000)


def _checked(resp: requests.Response) -> requests.Response:
    try:
        resp.raise_for_status()
    except requests.HTTPError as exc:
        raise HttpError(str(exc), resp.status_code) from exc
    return resp


def http_get(session: requests.Session, url: str) -> requests.Response:
    """GET *url*, mapping transport failures and error statuses to HttpError."""
    log.debug("GET %s", url)
    try:
        resp = session.get(url, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as exc:
        raise HttpError(str(exc)) from exc
    return _checked(resp)


def goform_get(session: requests.Session, host: str, query: str) -> requests.Response:
    """GET goform_get_cmd_process with a pre-built query string."""
    return http_get(session, f"{goform_url(host)}{GET_CMD}?{query}")


def goform_set(session: requests.Session, host: str, data: dict) -> requests.Response:
    """POST a form-encoded command to goform_set_cmd_process."""
    url = goform_url(host) + SET_CMD
    log.debug("POST %s goformId=%s", url, data.get("goformId"))
    try:
        resp = session.post(url, data=data, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as exc:
        raise HttpError(str(exc)) from exc
    return _checked(resp)
