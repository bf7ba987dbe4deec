"""Library exceptions."""


class ZteSmsError(Exception):
    """Generic ZTE SMS client exception."""


# Transport
class HttpError(ZteSmsError):
    """Router returned a non-success status or could not be reached."""

    def __init__(self, reason, code=None):
        self.reason = reason
        self.code = code
        message = reason or ""
        if code:
            message += f" ({code})"
        super().__init__(message)


# Login
class ChallengeUnavailable(ZteSmsError):
    """The LD challenge could not be obtained."""

    def __init__(self, reason="LD not found."):
        super().__init__(reason)


class LoginError(ZteSmsError):
    """Router rejected the login."""


class AccountLocked(LoginError):
    """Router reported the admin account as locked (result '1')."""

    def __init__(self):
        super().__init__("Account is locked.")


class LoginFailed(LoginError):
    """Any other non-zero login result."""

    def __init__(self, result=None):
        self.result = result
        super().__init__("Login unsuccessful.")
