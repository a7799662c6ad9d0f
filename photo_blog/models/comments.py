"""
Comment model for django-photo-blog.
"""
from django.db import models

from .authors import Author, RecordIdField


class Comment(models.Model):
    """
    Comment on a post.

    The post reference carries no database constraint and no ORM
    cascade; deleting a post removes its comments explicitly
    through BlogLifecycleManager.delete_blog.
    """

    id = RecordIdField()
    content = models.TextField()
    blog = models.ForeignKey(
        "photo_blog.Post",
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="comments",
    )
    author = models.ForeignKey(
        Author,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="comments",
    )
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ["created_at"]

    def __str__(self):
        return f"Comment {self.pk} on {self.blog_id}"

    @property
    def preview(self):
        """Return truncated content for admin display."""
        if len(self.content) > 100:
            return self.content[:100] + "..."
        return self.content
