"""
URL configuration for django-photo-blog.

Include in your project urls.py:

    path('', include('photo_blog.urls')),
"""
from django.urls import path

from . import views

app_name = "photo_blog"

urlpatterns = [
    # Create and update
    path("blog/", views.BlogView.as_view(), name="blog"),

    # List, must precede the detail route
    path("blog/all/", views.BlogListView.as_view(), name="blog_list"),

    # Fetch and delete
    path("blog/<str:id>/", views.BlogDetailView.as_view(), name="blog_detail"),
]
