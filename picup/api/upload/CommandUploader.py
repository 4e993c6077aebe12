"""Uploader running an external command."""

import logging
import re
import subprocess
from collections.abc import Sequence
from pathlib import Path

from .Uploader import Uploader

logger = logging.getLogger(__name__)

URL_PATTERN = re.compile(r"https?://\S+")


class CommandUploader(Uploader):
    """Run ``command + paths`` and take the http(s) URLs printed on stdout.

    Works with CLIs such as ``picgo upload`` that print one URL per file.
    """

    def __init__(self, command: Sequence[str], timeout_secs: float = 30.0):
        self.command = list(command)
        self.timeout_secs = timeout_secs

    def upload(self, paths: Sequence[Path | str]) -> list[str] | None:
        files = [str(p) for p in paths]
        if not files:
            return []
        argv = self.command + files
        try:
            proc = subprocess.run(argv, capture_output=True, text=True, timeout=self.timeout_secs, check=False)
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.warning(f"Upload command {argv[0]!r} failed: {e}")
            return None

        if proc.returncode != 0:
            logger.warning(f"Upload command exited with {proc.returncode}: {proc.stderr.strip()}")
            return None

        urls = URL_PATTERN.findall(proc.stdout)
        if len(urls) < len(files):
            logger.warning(f"Upload command printed {len(urls)} URL(s) for {len(files)} file(s)")
            return None

        # The last len(files) URLs are the uploaded ones
        return urls[-len(files):]
