from __future__ import annotations

import os
from typing import Mapping

from pydantic import BaseModel, field_validator

from .exceptions import ConfigurationError

TOKEN_ENV_VAR = "JUPYTERLAB_API_TOKEN"
DEFAULT_URL = "http://localhost:8888/api"


class Config(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}


class ClientConfig(Config):
    token: str
    url: str = DEFAULT_URL

    @field_validator("url")
    @classmethod
    def strip_trailing_slash(cls, url: str) -> str:
        return url.rstrip("/")

    @classmethod
    def from_env(
        cls,
        token: str | None = None,
        url: str | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> ClientConfig:
        """Build a config, reading the token from the environment if not given.

        The environment mapping defaults to ``os.environ`` and can be passed
        explicitly to keep the lookup free of process-wide state.
        """
        if environ is None:
            environ = os.environ
        if not token:
            token = environ.get(TOKEN_ENV_VAR)
            if not token:
                raise ConfigurationError(
                    f"api token not defined, can be set via {TOKEN_ENV_VAR}"
                )
        if url is None:
            return cls(token=token)
        return cls(token=token, url=url)
