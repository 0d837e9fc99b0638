"""Exceptions raised by BrowserKit helpers."""


class BrowserKitError(RuntimeError):
    """Base class for BrowserKit exceptions."""


class CapabilityError(BrowserKitError, TypeError):
    """Raised when an emitter exposes neither supported listener protocol."""

    def __init__(self, action: str, emitter: object) -> None:
        super().__init__(
            f"cannot {action}: emitter supports neither add/remove-event-listener "
            "nor add/remove-listener protocols"
        )
        self.action = action
        self.emitter = emitter


class UnsupportedValidationKind(BrowserKitError, ValueError):
    """Raised when a validator is asked for an unknown field kind."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"Unsupported validation kind '{kind}'")
        self.kind = kind


class CryptoError(BrowserKitError):
    """Raised when ciphertext cannot be decrypted."""


class ConfigError(BrowserKitError, ValueError):
    """Raised when environment configuration cannot be parsed."""
