"""Per-invocation upload deduplication."""

import logging
import threading
from concurrent.futures import Future
from pathlib import Path

from ..upload.Uploader import Uploader

logger = logging.getLogger(__name__)


class UploadCache:
    """Map absolute paths to uploaded URLs, uploading each path at most once.

    Failed uploads are not cached, so a later request for the same path
    tries again. Concurrent requests for one path share a single in-flight
    upload and all receive its result.
    """

    def __init__(self, uploader: Uploader):
        self._uploader = uploader
        self._urls: dict[str, str] = {}
        self._in_flight: dict[str, Future] = {}
        self._lock = threading.Lock()
        self.upload_count = 0

    @property
    def uploaded(self) -> dict[str, str]:
        """Copy of the path -> URL mapping."""
        with self._lock:
            return dict(self._urls)

    def resolve_url(self, path: Path | str) -> str | None:
        """Return the remote URL for ``path``, uploading on a cache miss.

        Returns:
            The URL, or None when the upload failed.
        """
        key = str(path)
        with self._lock:
            url = self._urls.get(key)
            if url is not None:
                logger.debug(f"Upload cache hit for {key}")
                return url
            pending = self._in_flight.get(key)
            owner = pending is None
            if owner:
                pending = Future()
                self._in_flight[key] = pending
                self.upload_count += 1

        if not owner:
            return pending.result()

        url = None
        try:
            urls = self._uploader.upload([key])
            if urls:
                url = urls[0] or None
        finally:
            with self._lock:
                if url:
                    self._urls[key] = url
                del self._in_flight[key]
            pending.set_result(url)

        if url:
            logger.info(f"Uploaded {key} -> {url}")
        else:
            logger.warning(f"Upload returned no URL for {key}")
        return url
