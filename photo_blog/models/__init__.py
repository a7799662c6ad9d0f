"""
Models for django-photo-blog.

All models are importable from photo_blog.models:

    from photo_blog.models import Author, Post, Comment
"""
from .authors import Author, RECORD_ID_PATTERN, generate_object_id
from .posts import Post
from .comments import Comment

__all__ = [
    "Author",
    "Post",
    "Comment",
    "RECORD_ID_PATTERN",
    "generate_object_id",
]
