"""Custom exception hierarchy for pyrtti."""

from __future__ import annotations


class RttiError(Exception):
    """Base exception for all pyrtti errors."""


class RttiConfigError(RttiError):
    """Invalid or missing configuration."""


class RttiTransportError(RttiError):
    """HTTP-level failure (network, timeout, non-2xx)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        relay: str = "",
    ) -> None:
        self.status_code = status_code
        self.relay = relay
        super().__init__(message)


class RttiRelayEnvelopeError(RttiError):
    """A wrapping relay returned a malformed envelope or reported a failure."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        relay: str = "",
    ) -> None:
        self.status_code = status_code
        self.relay = relay
        super().__init__(message)


class RttiUnparseableError(RttiError):
    """Response body was neither a usable JSON nor XML document."""

    def __init__(self, message: str, *, relay: str = "") -> None:
        self.relay = relay
        super().__init__(message)


class RttiApiError(RttiError):
    """RTTI returned a vendor error code (application-level error)."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "",
        relay: str = "",
    ) -> None:
        self.code = code
        self.relay = relay
        super().__init__(message)


class RttiCredentialError(RttiApiError):
    """API key rejected by RTTI (e.g. code ``1002``).

    Retrying through another relay cannot help, so the relay chain is
    aborted as soon as this is seen.
    """


class RttiChainExhaustedError(RttiError):
    """Every relay strategy failed without a usable or fatal result.

    ``failures`` holds one exception per attempted strategy, in the
    order the strategies were tried.
    """

    def __init__(self, message: str, *, failures: tuple[RttiError, ...] = ()) -> None:
        self.failures = failures
        super().__init__(message)
