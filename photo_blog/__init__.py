"""
django-photo-blog - Blog posts with an attached photo.

Features:
- Inline (base64 data URI) photo uploads stored in a Django storage backend
- Photo replacement on update, old file removed before the new one is written
- Cascade deletion of comments when a post is deleted
- Configurable removal of the photo on post deletion
- Audit command for photos and posts that drifted apart
"""

__version__ = "0.1.0"
