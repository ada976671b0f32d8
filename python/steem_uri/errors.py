"""Steem URI errors.

Every failure is a local validation error raised synchronously to the
caller. All of them derive from SteemUriError, which is a ValueError so
callers can catch protocol failures the same way as other bad input.
"""

from __future__ import annotations


class SteemUriError(ValueError):
    """Base class for all steem:// protocol errors."""


class MalformedUri(SteemUriError):
    """The input could not be parsed as a URI."""


class InvalidProtocol(SteemUriError):
    """The URI scheme is not steem."""

    def __init__(self, protocol: str):
        self.protocol = protocol
        super().__init__(f"Invalid protocol, expected 'steem:' got '{protocol}:'")


class InvalidAction(SteemUriError):
    """The URI authority is not sign."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Invalid action, expected 'sign' got '{action}'")


class InvalidSigningAction(SteemUriError):
    """The signing kind in the path is not recognized."""

    def __init__(self, action: str, reason: str | None = None):
        self.action = action
        message = f"Invalid signing action '{action}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidPayload(SteemUriError):
    """The payload could not be decoded into the expected structure."""

    def __init__(self, message: str, cause: BaseException | None = None):
        self.cause = cause
        super().__init__(f"Invalid payload: {message}")


class SignerUnavailable(SteemUriError):
    """The resolved signer is not one of the available accounts."""

    def __init__(self, signer: str | None):
        self.signer = signer
        super().__init__(f"Signer '{signer}' not available")


class MalformedEncoding(SteemUriError):
    """Input is not valid Base64u text."""
