"""Django app configuration for photo_blog."""
import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class PhotoBlogConfig(AppConfig):
    """Configuration for the photo blog app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "photo_blog"
    verbose_name = "Photo Blog"

    def ready(self):
        """Create the asset directory once at startup."""
        from .exceptions import AssetWriteError
        from .storage import default_asset_store

        try:
            default_asset_store().ensure_location()
        except AssetWriteError as exc:
            # Writes will fail with the same error; management commands still run
            logger.warning("%s", exc)
