"""Uploader talking to a running PicGo HTTP server."""

import logging
from collections.abc import Sequence
from pathlib import Path

import requests  # type: ignore

from ...constants import DEFAULT_PICGO_URL
from .Uploader import Uploader

logger = logging.getLogger(__name__)


class PicgoUploader(Uploader):
    """POST ``{"list": [...]}`` to the PicGo server and read ``result`` URLs."""

    def __init__(self, url: str = DEFAULT_PICGO_URL, timeout_secs: float = 30.0):
        self.url = url
        self.timeout_secs = timeout_secs

    def upload(self, paths: Sequence[Path | str]) -> list[str] | None:
        files = [str(p) for p in paths]
        if not files:
            return []
        try:
            response = requests.post(self.url, json={"list": files}, timeout=self.timeout_secs)
            response.raise_for_status()
            body = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"PicGo upload of {len(files)} file(s) failed: {e}")
            return None

        if not isinstance(body, dict) or not body.get("success"):
            logger.warning(f"PicGo server rejected upload: {body!r}")
            return None

        urls = body.get("result") or []
        if not isinstance(urls, list) or len(urls) != len(files):
            logger.warning(f"PicGo returned {len(urls) if isinstance(urls, list) else 0} URL(s) for {len(files)} file(s)")
            return None

        logger.info(f"Uploaded {len(files)} file(s) via PicGo")
        return [str(u) for u in urls]
