# =========================
# ERRORS

# Failure taxonomy for BGG lookups
# =========================

from typing import Optional


class BGGError(Exception):
    """
    Base class for every failure an operation turns into an error payload.
    """


class InvalidRequestError(BGGError):
    """
    Caller input rejected before any request is sent.
    """


class TransportError(BGGError):
    """
    The upstream call failed: non-2xx status, timeout or connection error.
    """

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class ParseError(BGGError):
    """
    The upstream body is not well-formed XML.
    """


class ShapeError(BGGError):
    """
    The parsed document does not match the expected schema.
    """

    def __init__(self, message: str, path: str = ""):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


class NotFoundError(BGGError):
    """
    The document is valid but holds no usable item.
    """
