"""
JSON views for django-photo-blog.

Thin glue between HTTP and BlogLifecycleManager: parse the body, call
the operation, and turn BlogError subclasses into error responses.
"""
import json
import logging

from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from .exceptions import BlogError, ValidationError
from .services import BlogLifecycleManager

logger = logging.getLogger(__name__)


def get_manager():
    return BlogLifecycleManager()


def error_response(error):
    """Render a BlogError as JSON with its status code."""
    if error.status_code >= 500:
        logger.error("Blog request failed: %s", error, exc_info=error)
    payload = {"error": error.message}
    if isinstance(error, ValidationError) and error.fields:
        payload["fields"] = error.fields
    return JsonResponse(payload, status=error.status_code)


def parse_json_body(request):
    try:
        data = json.loads(request.body or b"{}")
    except (ValueError, UnicodeDecodeError) as exc:
        raise ValidationError(f"Invalid JSON body: {exc}") from exc
    if not isinstance(data, dict):
        raise ValidationError("JSON body must be an object")
    return data


@method_decorator(csrf_exempt, name="dispatch")
class BlogView(View):
    """Create (POST) or update (PUT) a post."""

    http_method_names = ["post", "put"]

    def post(self, request):
        try:
            blog = get_manager().create_blog(parse_json_body(request))
        except BlogError as error:
            return error_response(error)
        return JsonResponse({"blog": blog}, status=201)

    def put(self, request):
        try:
            result = get_manager().update_blog(parse_json_body(request))
        except BlogError as error:
            return error_response(error)
        return JsonResponse(result)


class BlogListView(View):
    """List all posts."""

    http_method_names = ["get"]

    def get(self, request):
        try:
            blogs = get_manager().list_blogs()
        except BlogError as error:
            return error_response(error)
        return JsonResponse({"blogs": blogs})


@method_decorator(csrf_exempt, name="dispatch")
class BlogDetailView(View):
    """Fetch (GET) or delete (DELETE) a single post."""

    http_method_names = ["get", "delete"]

    def get(self, request, id):
        try:
            blog = get_manager().get_blog(id)
        except BlogError as error:
            return error_response(error)
        return JsonResponse({"blog": blog})

    def delete(self, request, id):
        try:
            result = get_manager().delete_blog(id)
        except BlogError as error:
            return error_response(error)
        return JsonResponse(result)
