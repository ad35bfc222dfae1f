from typing import Union

import httpx


class WordpressError(Exception):
    """A WordPress response was received but could not be used."""

    tag = "WordpressError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(ValueError):
    """The client was given incomplete credentials."""


# What a single client call can raise: the transport's own errors pass through
# untouched, a body that is not JSON becomes httpx.DecodingError, and everything
# WordPress-specific is a WordpressError.
ApiError = Union[httpx.HTTPError, WordpressError]
