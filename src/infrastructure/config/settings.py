"""
Runtime configuration read from the environment.

Composition roots call GatewaySettings.from_env() once at startup (after
load_dotenv(), so a local .env file is honoured) and inject the result.

Environment variables:
    YAHOO_HTTP_TIMEOUT     seconds per direct HTTP call (default 10)
    YAHOO_USER_AGENT       User-Agent sent on direct HTTP calls
    YAHOO_DEFAULT_REGION   region used by front-end resources (default US)
    YAHOO_DEFAULT_LANG     language used by front-end resources (default en-US)
    LOG_LEVEL              loguru level (default INFO)
    LOG_FORMAT             "console" or "json" (default console)
"""

import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_7_0) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/121.0.0.0 Safari/537.36"
)


class GatewaySettings(BaseModel):
    http_timeout: float = Field(default=10.0, gt=0)
    user_agent: str = DEFAULT_USER_AGENT
    default_region: str = "US"
    default_lang: str = "en-US"
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "GatewaySettings":
        if dotenv:
            load_dotenv()
        env = {
            "http_timeout": os.environ.get("YAHOO_HTTP_TIMEOUT"),
            "user_agent": os.environ.get("YAHOO_USER_AGENT"),
            "default_region": os.environ.get("YAHOO_DEFAULT_REGION"),
            "default_lang": os.environ.get("YAHOO_DEFAULT_LANG"),
            "log_level": os.environ.get("LOG_LEVEL"),
            "log_format": os.environ.get("LOG_FORMAT"),
        }
        return cls.model_validate({key: value for key, value in env.items() if value})
