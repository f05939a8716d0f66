from __future__ import annotations


class JupyverseClientError(Exception):
    pass


class ConfigurationError(JupyverseClientError):
    pass


class TransportError(JupyverseClientError):
    pass


class StatusError(JupyverseClientError):
    def __init__(self, status_code: int, method: str, url: str):
        self.status_code = status_code
        self.method = method
        self.url = url
        super().__init__(f"{method} {url} returned status code of {status_code} instead of 2XX")


class DecodeError(JupyverseClientError):
    pass
