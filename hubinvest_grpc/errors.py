"""Exceptions raised across the gRPC edge."""


class InvalidCredentialsError(Exception):
    """Email/password pair did not match a user."""


class InvalidTokenError(Exception):
    """A bearer token failed validation (malformed, expired, bad signature)."""


class OrderNotFoundError(LookupError):
    """The requested order does not exist for this user."""


class ServerBindError(OSError):
    """The gRPC server could not listen on the requested address."""


class ContainerLoadError(ImportError):
    """The configured container factory could not be imported or called."""
