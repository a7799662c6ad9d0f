"""
Report photos and posts that drifted apart after interrupted operations.

    python manage.py audit_blog_assets           # report only
    python manage.py audit_blog_assets --prune   # also delete orphaned photos
"""
from django.core.management.base import BaseCommand, CommandError

from photo_blog.exceptions import BlogError
from photo_blog.services import BlogLifecycleManager


class Command(BaseCommand):
    help = "List photos no post references and posts whose photo is missing."

    def add_arguments(self, parser):
        parser.add_argument(
            "--prune",
            action="store_true",
            help="Delete photos that no post references.",
        )
        parser.add_argument(
            "--grace-seconds",
            type=int,
            default=None,
            help="Keep unreferenced photos written more recently than this.",
        )

    def handle(self, *args, **options):
        manager = BlogLifecycleManager()
        try:
            audit = manager.audit_assets()
        except BlogError as exc:
            raise CommandError(str(exc)) from exc

        for name in audit.orphaned_assets:
            self.stdout.write(f"orphaned asset: {name}")
        for post_id in audit.posts_missing_assets:
            self.stdout.write(f"post with missing asset: {post_id}")

        if options["prune"] and audit.orphaned_assets:
            pruned = manager.prune_orphaned_assets(grace_seconds=options["grace_seconds"])
            self.stdout.write(self.style.SUCCESS(f"Pruned {len(pruned)} orphaned assets"))

        self.stdout.write(
            f"{len(audit.orphaned_assets)} orphaned assets, "
            f"{len(audit.posts_missing_assets)} posts with missing assets"
        )
