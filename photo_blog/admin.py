"""
Django admin configuration for photo_blog.

Post deletion is routed through BlogLifecycleManager so that comments
are removed along with the post.
"""
from django.contrib import admin
from django.utils.html import format_html

from .models import Author, Post, Comment
from .services import BlogLifecycleManager


@admin.register(Author)
class AuthorAdmin(admin.ModelAdmin):
    list_display = ["username", "name", "email", "created_at"]
    search_fields = ["username", "name", "email"]
    readonly_fields = ["id", "created_at"]


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = [
        "thumbnail_preview",
        "title_preview",
        "author",
        "dimensions",
        "created_at",
    ]
    list_filter = ["created_at"]
    search_fields = ["title", "content", "author__username"]
    raw_id_fields = ["author"]
    date_hierarchy = "created_at"
    readonly_fields = [
        "id",
        "photo_path",
        "photo_name",
        "photo_width",
        "photo_height",
        "created_at",
        "updated_at",
    ]

    fieldsets = (
        (None, {
            "fields": ("id", "title", "content", "author")
        }),
        ("Photo", {
            "fields": ("photo_path", "photo_name", "photo_width", "photo_height"),
        }),
        ("Metadata", {
            "fields": ("created_at", "updated_at"),
            "classes": ("collapse",),
        }),
    )

    def has_add_permission(self, request):
        # Posts need a photo upload, which goes through the API
        return False

    def title_preview(self, obj):
        """Truncated title for list display."""
        return obj.title[:60] + "..." if len(obj.title) > 60 else obj.title

    title_preview.short_description = "Title"

    def thumbnail_preview(self, obj):
        if obj.photo_path:
            return format_html(
                '<img src="{}" style="max-width: 50px; max-height: 50px;" />',
                obj.photo_path,
            )
        return "-"

    thumbnail_preview.short_description = "Photo"

    def dimensions(self, obj):
        if obj.photo_width and obj.photo_height:
            return f"{obj.photo_width}x{obj.photo_height}"
        return "-"

    dimensions.short_description = "Size"

    def delete_model(self, request, obj):
        BlogLifecycleManager().delete_blog(obj.pk)

    def delete_queryset(self, request, queryset):
        manager = BlogLifecycleManager()
        for post_id in list(queryset.values_list("pk", flat=True)):
            manager.delete_blog(post_id)


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ["preview", "author", "blog", "created_at"]
    list_filter = ["created_at"]
    search_fields = ["content", "author__username"]
    raw_id_fields = ["blog", "author"]
    readonly_fields = ["id", "created_at"]
