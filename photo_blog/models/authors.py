"""
Author model and record id generation for django-photo-blog.
"""
import re
import secrets
import time

from django.db import models

RECORD_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")


def generate_object_id():
    """
    Generate a 24-character hexadecimal record id.

    The first 8 digits encode the creation time in Unix seconds,
    so ids sort roughly by insertion time.
    """
    return f"{int(time.time()):08x}{secrets.token_hex(8)}"


class RecordIdField(models.CharField):
    """Primary key holding a generated 24-hex record id."""

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("max_length", 24)
        kwargs.setdefault("primary_key", True)
        kwargs.setdefault("default", generate_object_id)
        kwargs.setdefault("editable", False)
        super().__init__(*args, **kwargs)


class Author(models.Model):
    """
    Person a post or comment is attributed to.

    Posts only hold a reference to their author; the full record
    is resolved when a single post is fetched.
    """

    id = RecordIdField()
    name = models.CharField(max_length=100)
    username = models.CharField(max_length=50, unique=True)
    email = models.EmailField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["username"]

    def __str__(self):
        return self.name or self.username
