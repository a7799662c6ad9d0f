"""
Tests for django-photo-blog models.
"""
from datetime import timedelta

import pytest
from django.utils import timezone

from photo_blog.models import (
    Author,
    Post,
    Comment,
    RECORD_ID_PATTERN,
    generate_object_id,
)


@pytest.fixture
def post(db, author):
    """Create a test post."""
    return Post.objects.create(
        title="Test Post",
        content="This is a test post body.",
        author=author,
        photo_path="http://testserver/storage/1700000000000-507f1f77bcf86cd799439011.png",
        photo_name="1700000000000-507f1f77bcf86cd799439011.png",
    )


class TestRecordIds:
    """Tests for generated record ids."""

    def test_generated_id_format(self):
        record_id = generate_object_id()
        assert len(record_id) == 24
        assert RECORD_ID_PATTERN.match(record_id)

    def test_generated_ids_are_unique(self):
        ids = {generate_object_id() for _ in range(100)}
        assert len(ids) == 100

    def test_models_get_generated_ids(self, db):
        author = Author.objects.create(name="Ada", username="ada")
        assert RECORD_ID_PATTERN.match(author.pk)


class TestAuthor:
    def test_str(self, author):
        assert str(author) == "Test Author"

    def test_str_falls_back_to_username(self, db):
        author = Author.objects.create(username="anon")
        assert str(author) == "anon"


class TestPost:
    """Tests for Post model."""

    def test_create_post(self, post, author):
        assert post.title == "Test Post"
        assert post.author == author
        assert post.created_at is not None
        assert str(post) == "Test Post"

    def test_asset_name_from_field(self, post):
        assert post.asset_name == "1700000000000-507f1f77bcf86cd799439011.png"

    def test_asset_name_falls_back_to_url(self, post):
        post.photo_name = ""
        post.photo_path = "http://testserver/storage/legacy-photo.png"
        assert post.asset_name == "legacy-photo.png"

    def test_get_author_when_dangling(self, db):
        post = Post.objects.create(
            title="Orphan",
            content="No author record",
            author_id="aaaaaaaaaaaaaaaaaaaaaaaa",
            photo_path="http://testserver/storage/x.png",
        )
        post.refresh_from_db()
        assert post.get_author() is None

    def test_newest_first(self, db, author):
        older = Post.objects.create(
            title="Older", content="a", author=author, photo_path="http://t/s/a.png"
        )
        newer = Post.objects.create(
            title="Newer", content="b", author=author, photo_path="http://t/s/b.png"
        )
        Post.objects.filter(pk=older.pk).update(
            created_at=timezone.now() - timedelta(days=1)
        )
        assert list(Post.objects.all()) == [newer, older]


class TestComment:
    """Tests for Comment model."""

    def test_create_comment(self, post, author):
        comment = Comment.objects.create(blog=post, author=author, content="Great post!")
        assert comment.content == "Great post!"
        assert comment.blog == post
        assert post.comments.count() == 1

    def test_preview(self, post, author):
        comment = Comment.objects.create(blog=post, author=author, content="x" * 150)
        assert len(comment.preview) == 103  # 100 + "..."

    def test_orm_delete_does_not_cascade(self, post, author):
        """Comments are removed by the lifecycle manager, not the ORM."""
        Comment.objects.create(blog=post, author=author, content="Still here")
        Post.objects.filter(pk=post.pk).delete()

        assert Comment.objects.filter(blog_id=post.pk).count() == 1
