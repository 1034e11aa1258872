"""
pyxmltv.sources - XMLTV source loading

Reads documents from local files (plain or gzip compressed), standard input
or http(s) URLs. Remote downloads reuse one session with automatic retries.
"""

import gzip
import logging
import sys
from pathlib import Path
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry


class SourceLoader:
    """Loads XMLTV text from a path, "-" (stdin) or an http(s) URL"""

    STDIN = "-"
    REMOTE_SCHEMES = ("http://", "https://")

    def __init__(self, timeout: int = 30, retries: int = 3, encoding: str = "utf-8"):
        self.session: Optional[requests.Session] = None
        self.timeout = timeout
        self.retries = retries
        self.encoding = encoding
        self.total_requests = 0
        self.total_bytes = 0

    def init_session(self):
        """Initialize session with retries on transient server errors"""
        if self.session:
            self.session.close()

        self.session = requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/xml, text/xml, application/gzip, */*",
                "Accept-Encoding": "gzip, deflate",
                "Connection": "keep-alive",
            }
        )

        retry_strategy = Retry(
            total=self.retries,
            backoff_factor=0.5,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET"],
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)

        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

    @classmethod
    def is_remote(cls, location: str) -> bool:
        return location.lower().startswith(cls.REMOTE_SCHEMES)

    def load(self, location: str) -> str:
        """
        Read a complete document

        Raises:
            OSError: a local file can't be read
            requests.exceptions.RequestException: a download failed
        """
        if location == self.STDIN:
            logging.debug("Reading XMLTV from standard input")
            return sys.stdin.read()

        if self.is_remote(location):
            return self._decode(self.download(location), location)

        path = Path(location)
        logging.info("Reading XMLTV file: %s", path)
        return self._decode(path.read_bytes(), location)

    def download(self, url: str) -> bytes:
        """Fetch a remote document, failing on any non-2xx response"""
        if self.session is None:
            self.init_session()

        self.total_requests += 1
        logging.info("Downloading XMLTV: %s (timeout: %ds)", url, self.timeout)

        response = self.session.get(url, timeout=self.timeout)
        response.raise_for_status()

        content = response.content
        self.total_bytes += len(content)
        logging.debug("  Success: %d bytes received", len(content))
        return content

    def _decode(self, content: bytes, location: str) -> str:
        # gzip magic number; servers may send .gz files without a Content-Encoding
        if content[:2] == b"\x1f\x8b":
            logging.debug("Decompressing gzip content from %s", location)
            content = gzip.decompress(content)
        return content.decode(self.encoding)

    def close(self):
        """Clean shutdown"""
        if self.session:
            self.session.close()
            self.session = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
