from __future__ import annotations


class HttpieError(Exception):
    """
    Base class for failures that end the process with exit status 1.
    """


class NetworkError(HttpieError):
    """
    The request could not be sent, or its response could not be read.

    Carries the display message of the underlying client error, which is
    also available as ``__cause__``.
    """
