"""decaysearch exceptions."""


class DecaySearchError(Exception):
    """Base exception for all decaysearch errors."""


class EmptyQueryError(DecaySearchError):
    """Raised when a query is empty once sanitized; the builder is never invoked."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__("Query is empty")


class ConfigError(DecaySearchError):
    """Raised on invalid configuration."""


class InvalidParamsError(DecaySearchError):
    """Raised when generation parameters fall outside their documented ranges."""

    def __init__(self, params: object):
        self.params = params
        super().__init__(
            "Parameters out of range: vector_count 1-20, density 128-1024, page_offset 0-9"
        )
