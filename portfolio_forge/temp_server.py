"""
Temporary file server for previewing generated portfolios locally
"""
from __future__ import annotations

import logging
import shutil
import socket
import tempfile
import threading
from http.server import HTTPServer, SimpleHTTPRequestHandler
from pathlib import Path
from typing import Dict, Optional

from portfolio_forge import config

logger = logging.getLogger(__name__)


class TempHTMLServer:
    def __init__(self, host: str | None = None):
        self.host = host or config.PREVIEW_HOST
        self.server = None
        self.server_thread = None
        self.temp_dir = None
        self.port = None
        self.is_running = False

    def start_server(self, files: Dict[str, str], entry: str = "index.html") -> str:
        """
        Write `files` into a fresh temp directory and serve it over HTTP.
        Any running server is stopped first. Returns the URL of `entry`.
        """
        if self.is_running:
            self.stop_server()

        self.temp_dir = tempfile.mkdtemp(prefix="portfolio-")
        self._write(files)
        self.port = self._find_free_port()

        directory = self.temp_dir

        class QuietHandler(SimpleHTTPRequestHandler):
            def __init__(self, *args, **kwargs):
                super().__init__(*args, directory=directory, **kwargs)

            def log_message(self, format, *args):
                logger.debug("preview: " + format, *args)

        self.server = HTTPServer((self.host, self.port), QuietHandler)
        self.server_thread = threading.Thread(target=self.server.serve_forever, daemon=True)
        self.server_thread.start()
        self.is_running = True
        logger.info("Preview server listening on %s:%s", self.host, self.port)
        return self._url(entry)

    def stop_server(self):
        """Stop the server and remove its temp directory"""
        if self.server:
            try:
                self.server.shutdown()
                self.server.server_close()
            except OSError as e:
                logger.warning("Preview server shutdown failed: %s", e)
            self.server = None

        if self.server_thread:
            self.server_thread.join(timeout=2)
            self.server_thread = None

        if self.temp_dir:
            shutil.rmtree(self.temp_dir, ignore_errors=True)
            self.temp_dir = None

        self.is_running = False

    def update_content(self, files: Dict[str, str], entry: str = "index.html") -> str:
        """
        Replace the served files without changing port.
        Starts a server when none is running.
        """
        if not self.is_running or not self.temp_dir:
            return self.start_server(files, entry)
        self._write(files)
        return self._url(entry)

    def is_server_running(self) -> bool:
        return self.is_running and self.server is not None

    def get_current_url(self, entry: str = "index.html") -> Optional[str]:
        if self.is_server_running():
            return self._url(entry)
        return None

    def _write(self, files: Dict[str, str]):
        for name, text in files.items():
            (Path(self.temp_dir) / name).write_text(text, encoding="utf-8")

    def _url(self, entry: str) -> str:
        return f"http://localhost:{self.port}/{entry}"

    def _find_free_port(self) -> int:
        """Find a free port to use for the server"""
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.bind(("", 0))
            return s.getsockname()[1]


# Global instance for the streamlit app
_temp_server = TempHTMLServer()


def serve_html_temporarily(html_content: str, filename: str = "index.html") -> str:
    """
    Serve a single (inlined) document.
    Updates existing server content if running, otherwise starts a new server.
    """
    return _temp_server.update_content({filename: html_content}, filename)


def serve_files_temporarily(files: Dict[str, str], entry: str = "index.html") -> str:
    """Serve a multi-file bundle such as packaging.bundle_files() output."""
    return _temp_server.update_content(files, entry)


def cleanup_temp_server():
    """Stop and cleanup the temporary server"""
    _temp_server.stop_server()


def get_server_status() -> dict:
    return {
        "is_running": _temp_server.is_server_running(),
        "url": _temp_server.get_current_url(),
        "port": _temp_server.port if _temp_server.is_running else None,
    }
