"""
Lifecycle of blog posts and their photos.

Every mutating operation pairs asset steps with a record step:

    create   write photo -> insert post
    update   delete old photo -> write new photo -> update post
    delete   delete post and its comments -> (delete photo)

No transaction spans the database and the asset store. When a later
step fails, the asset steps already taken are undone on a best-effort
basis and the first error is raised to the caller.
"""
import logging
import time
from collections import namedtuple
from datetime import timedelta

from django.db import DatabaseError, transaction
from django.utils import timezone

from .conf import blog_settings
from .dto import blog_details_dto, blog_dto
from .exceptions import (
    AssetDeleteError,
    AssetWriteError,
    NotFound,
    PersistenceError,
    ValidationError,
)
from .forms import BlogIdForm, CreateBlogForm, UpdateBlogForm
from .images import decode_inline_image, read_dimensions
from .models import Comment, Post
from .storage import default_asset_store, generate_asset_name

logger = logging.getLogger(__name__)

AssetAudit = namedtuple("AssetAudit", ["orphaned_assets", "posts_missing_assets"])


def validate(form_class, data):
    """
    Validate raw input against a form and return its cleaned data.

    Raises:
        ValidationError: with the per-field messages in ``fields``.
    """
    form = form_class(data=data or {})
    if not form.is_valid():
        fields = {
            name: [error["message"] for error in errors]
            for name, errors in form.errors.get_json_data().items()
        }
        message = "; ".join(
            f"{name}: {' '.join(messages)}" for name, messages in fields.items()
        )
        raise ValidationError(message, fields=fields)
    return form.cleaned_data


class BlogLifecycleManager:
    """
    Create, read, update and delete blog posts together with their photos.

    Args:
        asset_store: AssetStore holding the photos. Defaults to the one
            configured by the PHOTO_BLOG settings.
        clock: callable returning the current Unix time in seconds,
            used to name new assets.
    """

    def __init__(self, asset_store=None, clock=None):
        self.asset_store = asset_store or default_asset_store()
        self.clock = clock or time.time

    # Reads

    def list_blogs(self):
        """Return the summary of every post, newest first."""
        try:
            return [blog_dto(post) for post in Post.objects.all()]
        except DatabaseError as exc:
            raise PersistenceError(f"Could not list blogs: {exc}") from exc

    def get_blog(self, blog_id):
        """Return one post with its author expanded."""
        cleaned = validate(BlogIdForm, {"id": blog_id})
        post = self._lookup(cleaned["id"])
        try:
            return blog_details_dto(post)
        except DatabaseError as exc:
            raise PersistenceError(f"Could not load author of blog {post.pk}: {exc}") from exc

    # Writes

    def create_blog(self, data):
        """
        Store the photo, then insert the post pointing at it.

        If the insert fails the photo is removed again.
        """
        cleaned = validate(CreateBlogForm, data)
        image = decode_inline_image(cleaned["photo"])
        author_id = cleaned["author"]

        self.asset_store.ensure_location()
        asset_name = self.asset_store.write(
            generate_asset_name(author_id, self.clock()), image
        )
        width, height = read_dimensions(image)

        try:
            post = Post.objects.create(
                title=cleaned["title"],
                content=cleaned["content"],
                author_id=author_id,
                photo_path=self.asset_store.url(asset_name),
                photo_name=asset_name,
                photo_width=width,
                photo_height=height,
            )
        except DatabaseError as exc:
            self._discard_asset(asset_name)
            raise PersistenceError(f"Could not save blog: {exc}") from exc

        logger.info("Created blog %s with photo %s", post.pk, asset_name)
        return blog_dto(post)

    def update_blog(self, data):
        """
        Update title and content, replacing the photo if one is given.

        The old photo is deleted before the new one is written, and both
        happen before the record is updated. A missing old photo aborts
        the update with the record untouched.
        """
        cleaned = validate(UpdateBlogForm, data)
        blog_id = cleaned["blog_id"]
        post = self._lookup(blog_id)

        fields = {
            "title": cleaned["title"],
            "content": cleaned["content"],
            "updated_at": timezone.now(),
        }

        if not cleaned.get("photo"):
            self._update_record(blog_id, fields)
            logger.info("Updated blog %s", blog_id)
            return {"message": "blog updated!"}

        image = decode_inline_image(cleaned["photo"])
        old_name = post.asset_name
        previous = self._snapshot(old_name)
        self.asset_store.delete(old_name)

        try:
            new_name = self.asset_store.write(
                generate_asset_name(cleaned["author"], self.clock()), image
            )
        except AssetWriteError:
            self._restore_asset(old_name, previous)
            raise

        width, height = read_dimensions(image)
        fields.update(
            photo_path=self.asset_store.url(new_name),
            photo_name=new_name,
            photo_width=width,
            photo_height=height,
        )

        try:
            self._update_record(blog_id, fields)
        except PersistenceError:
            self._discard_asset(new_name)
            self._restore_asset(old_name, previous)
            raise

        logger.info("Updated blog %s, photo %s replaced by %s", blog_id, old_name, new_name)
        return {"message": "blog updated!"}

    def delete_blog(self, blog_id):
        """
        Delete a post and every comment referencing it.

        Succeeds whether or not the post exists. The photo is kept unless
        PHOTO_BLOG['DELETE_ASSET_ON_POST_DELETE'] is set.
        """
        cleaned = validate(BlogIdForm, {"id": blog_id})
        blog_id = cleaned["id"]
        asset_name = None

        try:
            with transaction.atomic():
                if blog_settings.DELETE_ASSET_ON_POST_DELETE:
                    post = Post.objects.filter(pk=blog_id).first()
                    asset_name = post.asset_name if post else None
                Post.objects.filter(pk=blog_id).delete()
                removed, _ = Comment.objects.filter(blog_id=blog_id).delete()
        except DatabaseError as exc:
            raise PersistenceError(f"Could not delete blog {blog_id}: {exc}") from exc

        if asset_name:
            self._discard_asset(asset_name)

        logger.info("Deleted blog %s and %d comments", blog_id, removed)
        return {"message": "blog deleted"}

    # Reconciliation

    def audit_assets(self):
        """
        Compare stored assets with the posts referencing them.

        Returns an AssetAudit with the asset names no post references and
        the ids of posts whose asset is missing from the store.
        """
        stored = set(self.asset_store.listdir())
        try:
            referenced = {
                post.pk: post.asset_name
                for post in Post.objects.only("id", "photo_name", "photo_path")
            }
        except DatabaseError as exc:
            raise PersistenceError(f"Could not read blogs: {exc}") from exc

        orphaned = sorted(stored - set(referenced.values()))
        missing = sorted(pk for pk, name in referenced.items() if name not in stored)
        return AssetAudit(orphaned, missing)

    def prune_orphaned_assets(self, grace_seconds=None):
        """
        Delete assets no post references. Returns the deleted names.

        Assets written within the last ``grace_seconds`` (default
        PHOTO_BLOG['ORPHAN_GRACE_SECONDS']) are kept: a create may have
        written its photo without having inserted the post yet.
        """
        if grace_seconds is None:
            grace_seconds = blog_settings.ORPHAN_GRACE_SECONDS
        cutoff = timezone.now() - timedelta(seconds=grace_seconds)

        pruned = []
        for name in self.audit_assets().orphaned_assets:
            try:
                if self.asset_store.modified_time(name) > cutoff:
                    logger.info("Keeping recent unreferenced asset %s", name)
                    continue
            except OSError as exc:
                logger.warning("Could not stat asset %s: %s", name, exc)
                continue
            try:
                self.asset_store.delete(name)
            except AssetDeleteError as exc:
                logger.warning("Could not prune asset %s: %s", name, exc)
                continue
            pruned.append(name)
        return pruned

    # Helpers

    def _lookup(self, blog_id):
        try:
            post = Post.objects.filter(pk=blog_id).first()
        except DatabaseError as exc:
            raise PersistenceError(f"Could not load blog {blog_id}: {exc}") from exc
        if post is None:
            raise NotFound(f"Blog {blog_id} not found")
        return post

    def _update_record(self, blog_id, fields):
        try:
            Post.objects.filter(pk=blog_id).update(**fields)
        except DatabaseError as exc:
            raise PersistenceError(f"Could not update blog {blog_id}: {exc}") from exc

    def _snapshot(self, name):
        """Read an asset's bytes so it can be restored, or None."""
        if not self.asset_store.exists(name):
            return None
        try:
            return self.asset_store.read(name)
        except OSError as exc:
            logger.warning("Could not snapshot asset %s: %s", name, exc)
            return None

    def _restore_asset(self, name, data):
        if data is None:
            return
        try:
            self.asset_store.write(name, data)
        except AssetWriteError as exc:
            logger.warning("Could not restore asset %s: %s", name, exc)

    def _discard_asset(self, name):
        try:
            self.asset_store.delete(name)
        except AssetDeleteError as exc:
            logger.warning("Could not remove asset %s: %s", name, exc)
