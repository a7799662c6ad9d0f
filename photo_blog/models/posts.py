"""
Post model for django-photo-blog.
"""
from django.db import models

from .authors import Author, RecordIdField


class Post(models.Model):
    """
    Blog post with a single attached photo.

    The photo bytes live in the asset store; the post keeps the
    asset's name and its public URL. Both are rewritten together
    whenever the photo is replaced.
    """

    id = RecordIdField()
    title = models.TextField()
    content = models.TextField()

    # Reference only; a missing author is tolerated
    author = models.ForeignKey(
        Author,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="posts",
    )

    # Photo
    photo_path = models.URLField(
        max_length=500,
        help_text="Public URL of the current photo",
    )
    photo_name = models.CharField(
        max_length=255,
        blank=True,
        help_text="Name of the current photo in the asset store",
    )
    photo_width = models.PositiveIntegerField(null=True, blank=True)
    photo_height = models.PositiveIntegerField(null=True, blank=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["author", "-created_at"]),
        ]

    def __str__(self):
        return self.title

    @property
    def asset_name(self):
        """
        Return the name of the current photo in the asset store.

        Records written before photo_name existed only carry the URL,
        so fall back to its last path segment.
        """
        if self.photo_name:
            return self.photo_name
        if self.photo_path:
            return self.photo_path.rstrip("/").split("/")[-1]
        return ""

    def get_author(self):
        """Return the referenced Author, or None if it no longer exists."""
        try:
            return self.author
        except Author.DoesNotExist:
            return None
