# sqlrelay/errors.py

class RelayError(Exception):
    """Failure that maps onto a client-facing status code and error code."""

    status_code: int = 500
    code: str = "internal_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(RelayError):
    code = "configuration_error"


class GatewayError(RelayError):
    code = "upstream_error"


class RateLimitError(GatewayError):
    status_code = 429
    code = "rate_limited"


class QuotaExceededError(GatewayError):
    status_code = 402
    code = "quota_exhausted"
