"""Local-disk object store for candidate documents."""
import logging
import os
import uuid

from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)


class StorageObjectNotFound(Exception):
    """The object behind a locator does not exist (anymore)."""


class LocalObjectStore:
    def __init__(self, root):
        self.root = os.path.abspath(root)

    def upload(self, key, data):
        """Write ``data`` under ``key`` and return a locator for it."""
        directory, file_name = os.path.split(key)
        stored_name = f"{uuid.uuid4().hex}_{secure_filename(file_name) or 'file'}"
        locator = "/".join(part for part in (directory.strip("/"), stored_name) if part)

        path = self._path(locator)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "wb") as fh:
            fh.write(data)

        logger.info(f"✅ Stored object {locator} ({len(data)} bytes)")
        return locator

    def open(self, locator):
        path = self._path(locator)
        if not os.path.exists(path):
            raise StorageObjectNotFound(locator)
        return open(path, "rb")

    def exists(self, locator):
        return os.path.exists(self._path(locator))

    def delete(self, locator):
        try:
            os.remove(self._path(locator))
        except FileNotFoundError as e:
            raise StorageObjectNotFound(locator) from e
        logger.info(f"🗑️ Deleted object {locator}")

    def _path(self, locator):
        path = os.path.abspath(os.path.join(self.root, locator))
        if os.path.commonpath([self.root, path]) != self.root:
            raise ValueError(f"Locator escapes the storage root: {locator}")
        return path
