"""
Input schemas for the blog operations.
"""
from django import forms
from django.core.validators import RegexValidator

from .models import RECORD_ID_PATTERN

record_id_validator = RegexValidator(
    RECORD_ID_PATTERN,
    message="Must be a 24-character hexadecimal id.",
)


class IdField(forms.CharField):
    """Record id; hex digits are accepted in either case and stored lowercase."""

    default_validators = [record_id_validator]

    def to_python(self, value):
        return super().to_python(value).lower()


class CreateBlogForm(forms.Form):
    title = forms.CharField()
    author = IdField()
    content = forms.CharField(strip=False)
    photo = forms.CharField(strip=False, help_text="Base64 encoded image")


class UpdateBlogForm(forms.Form):
    blog_id = IdField()
    title = forms.CharField()
    content = forms.CharField(strip=False)
    author = IdField()
    photo = forms.CharField(required=False, strip=False)


class BlogIdForm(forms.Form):
    id = IdField()
