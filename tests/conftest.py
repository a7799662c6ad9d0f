"""
Shared fixtures for django-photo-blog tests.
"""
import base64
import io

import pytest
from PIL import Image

from photo_blog.models import Author, Comment
from photo_blog.services import BlogLifecycleManager
from photo_blog.storage import AssetStore

AUTHOR_ID = "507f1f77bcf86cd799439011"


def make_png(width=4, height=3, color="red"):
    """Return PNG bytes of a solid image."""
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), color).save(buffer, format="PNG")
    return buffer.getvalue()


def data_uri(data, subtype="png"):
    return f"data:image/{subtype};base64,{base64.b64encode(data).decode()}"


class TickingClock:
    """Clock advancing one millisecond per call, so asset names never collide."""

    def __init__(self, start=1700000000.0):
        self.now = start

    def __call__(self):
        self.now += 0.001
        return self.now


@pytest.fixture
def author(db):
    """Create a test author."""
    return Author.objects.create(
        id=AUTHOR_ID,
        name="Test Author",
        username="testauthor",
        email="author@example.com",
    )


@pytest.fixture
def png_bytes():
    return make_png()


@pytest.fixture
def png_payload(png_bytes):
    return data_uri(png_bytes)


@pytest.fixture
def asset_store(tmp_path):
    """Asset store rooted in a per-test directory."""
    return AssetStore(
        location=str(tmp_path / "storage"),
        base_url="http://testserver/storage/",
    )


@pytest.fixture
def manager(asset_store):
    return BlogLifecycleManager(asset_store=asset_store, clock=TickingClock())


@pytest.fixture
def blog(db, manager, author, png_payload):
    """Create a post through the manager and return its summary."""
    return manager.create_blog({
        "title": "First Post",
        "author": author.pk,
        "content": "Hello photo blog.",
        "photo": png_payload,
    })


@pytest.fixture
def make_comments(db, author):
    def _make(blog_id, count):
        return [
            Comment.objects.create(
                blog_id=blog_id,
                author=author,
                content=f"Comment {i}",
            )
            for i in range(count)
        ]
    return _make


@pytest.fixture
def api_settings(settings, tmp_path):
    """Point the default asset store at a per-test directory."""
    settings.PHOTO_BLOG = {
        "BACKEND_SERVER_PATH": "http://testserver",
        "ASSET_ROOT": str(tmp_path / "api-storage"),
    }
    return settings
