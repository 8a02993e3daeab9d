#!/usr/bin/env python3
"""
Jisho lookup client - fetch a search-results page and parse it into entries
"""

import logging
from typing import List, Optional

import requests

from .config import JishoConfig, load_config
from .errors import FetchError
from .models import Entry
from .parsing import JishoParser

logger = logging.getLogger(__name__)


class JishoClient:
    """Client for jisho.org search pages"""

    def __init__(self, config: Optional[JishoConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or load_config()
        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': self.config.user_agent
        })
        self.parser = JishoParser(base_url=self.config.base_url)

    def fetch(self, term: str) -> str:
        """Fetch the raw HTML of the search page for a term"""
        url = self.config.search_url(term)
        logger.debug(f"Fetching {url}")

        try:
            response = self.session.get(url, timeout=self.config.timeout)
        except requests.RequestException as e:
            raise FetchError(f"Request for '{term}' failed: {e}") from e

        if not response.ok:
            raise FetchError(f"HTTP {response.status_code}: {response.reason}", status_code=response.status_code)

        return response.text

    def look_up(self, term: str) -> List[Entry]:
        """Fetch and parse the results for a term"""
        html = self.fetch(term)
        entries = self.parser.parse(html)
        logger.info(f"Found {len(entries)} entries for '{term}'")
        return entries

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
