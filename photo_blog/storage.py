"""
Asset storage for post photos.

Photos are kept in a Django storage backend (a FileSystemStorage rooted
at PHOTO_BLOG['ASSET_ROOT'] unless another backend is injected) and are
addressed by name. Their public URL is the configured base URL plus the
name.
"""
import logging
import os
import time

from django.core.files.base import ContentFile
from django.core.files.storage import FileSystemStorage

from .conf import blog_settings
from .exceptions import AssetDeleteError, AssetWriteError

logger = logging.getLogger(__name__)


def generate_asset_name(author_id, now=None):
    """
    Generate an asset name from the current time and the author id.

    Names look like ``1700000000000-507f1f77bcf86cd799439011.png``;
    the extension is fixed whatever the uploaded format was.
    """
    if now is None:
        now = time.time()
    millis = int(now * 1000)
    return f"{millis}-{author_id}{blog_settings.ASSET_EXTENSION}"


class AssetStore:
    """
    Binary photo store addressed by asset name.

    Wraps a Django Storage and turns its I/O failures into
    AssetWriteError / AssetDeleteError.
    """

    def __init__(self, location=None, base_url=None, storage=None):
        if storage is None:
            storage = FileSystemStorage(
                location=location or blog_settings.ASSET_ROOT,
                base_url=base_url or blog_settings.ASSET_BASE_URL,
            )
        self.storage = storage

    def ensure_location(self):
        """Create the storage directory if the backend is filesystem based."""
        location = getattr(self.storage, "location", None)
        if location and not os.path.isdir(location):
            try:
                os.makedirs(location, exist_ok=True)
            except OSError as exc:
                raise AssetWriteError(
                    f"Could not create asset directory {location}: {exc}"
                ) from exc
            logger.info("Created asset directory %s", location)

    def exists(self, name):
        return bool(name) and self.storage.exists(name)

    def write(self, name, data):
        """
        Store bytes under the given name.

        Returns the name actually used, which differs from the requested
        one only if the backend renamed the file to avoid a collision.
        """
        try:
            stored_name = self.storage.save(name, ContentFile(data))
        except OSError as exc:
            raise AssetWriteError(f"Could not write asset {name}: {exc}") from exc

        if stored_name != name:
            logger.warning("Asset %s already existed, stored as %s", name, stored_name)
        return stored_name

    def read(self, name):
        """Return the stored bytes. Raises OSError if the asset is unreadable."""
        with self.storage.open(name, "rb") as fh:
            return fh.read()

    def delete(self, name):
        """Delete an asset. A missing asset is an error."""
        if not self.exists(name):
            raise AssetDeleteError(f"Asset {name!r} does not exist")
        try:
            self.storage.delete(name)
        except OSError as exc:
            raise AssetDeleteError(f"Could not delete asset {name}: {exc}") from exc

    def modified_time(self, name):
        """Return when an asset was last written, as an aware datetime if USE_TZ."""
        return self.storage.get_modified_time(name)

    def url(self, name):
        """Return the public URL of an asset."""
        return self.storage.url(name)

    def listdir(self):
        """Return the names of all stored assets."""
        try:
            _dirs, files = self.storage.listdir("")
        except FileNotFoundError:
            return []
        return sorted(files)


def default_asset_store():
    """Build the asset store described by the PHOTO_BLOG settings."""
    return AssetStore()
