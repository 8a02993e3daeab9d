#!/usr/bin/env python3
"""
Configuration for jisho-cli
Site location, HTTP settings and logging defaults, overridable from the environment
"""

import os
import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional
from urllib.parse import quote

from . import __version__

logger = logging.getLogger(__name__)

REPOSITORY_URL = "https://github.com/jisho-cli/jisho-cli"

DEFAULT_BASE_URL = "https://jisho.org"
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = f"jisho-cli v{__version__} ({REPOSITORY_URL})"

# Logging Configuration
LOGGING = {
    'level': 'WARNING',
    'verbose_level': 'DEBUG',
    'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


@dataclass
class JishoConfig:
    """Settings for talking to the dictionary site"""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = field(default=DEFAULT_USER_AGENT)

    def __post_init__(self):
        """Validate configuration after initialization"""
        self.base_url = (self.base_url or '').rstrip('/')
        if not self.base_url:
            raise ValueError("Base URL is required")
        if not self.base_url.startswith(('http://', 'https://')):
            raise ValueError(f"Base URL must be http(s): {self.base_url}")
        if self.timeout <= 0:
            raise ValueError("Timeout must be positive")
        if not self.user_agent:
            raise ValueError("User agent is required")

    def search_url(self, term: str) -> str:
        return f"{self.base_url}/search/{quote(term, safe='')}"


def load_config(environ: Optional[Mapping[str, str]] = None) -> JishoConfig:
    """
    Build the configuration, letting environment variables override defaults:
    JISHO_BASE_URL, JISHO_TIMEOUT, JISHO_USER_AGENT
    """
    env = os.environ if environ is None else environ

    timeout_value = env.get('JISHO_TIMEOUT')
    try:
        timeout = float(timeout_value) if timeout_value else DEFAULT_TIMEOUT
    except ValueError:
        raise ValueError(f"JISHO_TIMEOUT must be a number, got {timeout_value!r}") from None

    config = JishoConfig(
        base_url=env.get('JISHO_BASE_URL') or DEFAULT_BASE_URL,
        timeout=timeout,
        user_agent=env.get('JISHO_USER_AGENT') or DEFAULT_USER_AGENT,
    )
    logger.debug(f"Loaded config: base_url={config.base_url} timeout={config.timeout}")
    return config
