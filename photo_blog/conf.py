"""
Configuration settings for django-photo-blog.

Override these in your Django settings.py:

    PHOTO_BLOG = {
        'BACKEND_SERVER_PATH': 'https://api.example.com',
        'ASSET_ROOT': '/var/lib/photo-blog/storage',
        'DELETE_ASSET_ON_POST_DELETE': True,
        ...
    }
"""
from django.conf import settings

DEFAULTS = {
    # Public base URL of this server, used to build photo URLs
    "BACKEND_SERVER_PATH": "http://localhost:5000",

    # Assets
    "ASSET_ROOT": "storage",
    "ASSET_URL_PATH": "storage",
    "ASSET_EXTENSION": ".png",
    "ALLOWED_IMAGE_TYPES": ["png", "jpg", "jpeg"],

    # Remove the image file when its post is deleted
    "DELETE_ASSET_ON_POST_DELETE": False,

    # Unreferenced assets younger than this are never pruned
    "ORPHAN_GRACE_SECONDS": 3600,
}


class PhotoBlogSettings:
    """
    Lazy settings object that reads from Django settings.

    Access via: from photo_blog.conf import blog_settings
    """

    def __getattr__(self, name):
        if name not in DEFAULTS:
            raise AttributeError(f"Invalid photo_blog setting: {name}")

        user_settings = getattr(settings, "PHOTO_BLOG", {})
        return user_settings.get(name, DEFAULTS[name])

    @property
    def ASSET_BASE_URL(self):
        """Return the absolute URL under which assets are served."""
        server = self.BACKEND_SERVER_PATH.rstrip("/")
        path = self.ASSET_URL_PATH.strip("/")
        return f"{server}/{path}/"


blog_settings = PhotoBlogSettings()
