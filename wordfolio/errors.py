""" Exceptions raised by the Wordfolio client and resolution protocols """


class WordfolioError(Exception):
    """Base class for all Wordfolio client errors."""


class NotAuthenticatedError(WordfolioError):
    """Raised before a request is sent when no access token is available."""

    def __init__(self) -> None:
        super().__init__("Not authenticated")


class UnexpectedStatus(WordfolioError):
    """Raised when the server returns an undocumented status code or an unreadable success body"""

    def __init__(self, status_code: int, content: bytes):
        self.status_code = status_code
        self.content = content

        super().__init__(
            f"Unexpected status code: {status_code}\n\nResponse content:\n{content.decode(errors='ignore')}"
        )


class GatewayBusyError(WordfolioError):
    """Raised when a prompt is raised while another decision is still outstanding."""


class GatewayClosedError(WordfolioError):
    """Raised when confirming a gateway with no open prompt, or raising on a closed one."""


class PipelineBusyError(WordfolioError):
    """Raised when submit() is called while a submission is still in flight."""


__all__ = [
    "GatewayBusyError",
    "GatewayClosedError",
    "NotAuthenticatedError",
    "PipelineBusyError",
    "UnexpectedStatus",
    "WordfolioError",
]
