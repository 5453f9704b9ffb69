"""
News Storage
============

Flat-file store for the news collection. The whole collection is read and
written as a single JSON array; every replace regenerates the share pages.
"""

import json
import os
import tempfile
import threading

from .logging_service import logger


class NewsStore:
    # Serializes replace() within this process; other processes still race
    _lock = threading.Lock()

    def __init__(self, path, generator=None):
        """
        Args:
            path: Location of the JSON document.
            generator: Optional SharePageGenerator rebuilt after each replace.
        """
        self.path = path
        self.generator = generator

    def _ensure_dir(self):
        db_dir = os.path.dirname(self.path)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)

    def _write(self, collection):
        """Write the document atomically via a temp file in the same directory"""
        self._ensure_dir()
        fd, tmp_path = tempfile.mkstemp(
            prefix='.news-', suffix='.tmp', dir=os.path.dirname(self.path) or '.'
        )
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(collection, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def load(self):
        """Return the stored collection.

        A missing document is bootstrapped to an empty array on disk. A
        malformed or unreadable document yields an empty list.
        """
        if not os.path.exists(self.path):
            logger.info('storage', f"News document not found, creating {self.path}")
            self._write([])
            return []

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning('storage', f"Could not read news document, serving empty collection: {e}")
            return []

        if not isinstance(data, list):
            logger.warning('storage', f"News document is a {type(data).__name__}, expected a list")
            return []

        return data

    def replace(self, collection):
        """Overwrite the stored collection and regenerate share pages.

        Only a failure to write the document raises; the share pages are
        rebuilt on the next read if regeneration fails.
        """
        with self._lock:
            self._write(collection)
            logger.info('storage', f"Saved {len(collection)} news items")
            if self.generator is None:
                return
            try:
                self.generator.regenerate_all(collection)
            except OSError as e:
                logger.log_error_with_traceback('share', e, {'stage': 'regenerate_on_replace'})
