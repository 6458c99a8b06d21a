"""Fetch lifecycle shared by every screen that loads remote data."""

from enum import Enum


class FetchState(Enum):
    """idle -> loading -> success | error. There is no retry transition."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"
