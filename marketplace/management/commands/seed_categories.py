import logging

from django.core.management.base import BaseCommand
from django.db import transaction

from marketplace.container import ServiceContainer
from marketplace.models import ItemCategory


logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Seeds the default item category tree into the database."

    def add_arguments(self, parser):
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Remove all categories, including custom ones, before seeding",
        )

    def handle(self, *args, **options):
        services = ServiceContainer()

        with transaction.atomic():
            if options["clear"]:
                deleted, _ = ItemCategory.objects.all().delete()
                self.stdout.write(self.style.WARNING(f"Removed {deleted} categories"))

            before = ItemCategory.objects.filter(key__isnull=False).count()
            self.stdout.write(self.style.SUCCESS("Seeding categories..."))
            root = services.default_item_category_service().seed_default_categories()
            created_count = ItemCategory.objects.filter(key__isnull=False).count() - before

        self.stdout.write(
            self.style.SUCCESS(f"Category seeding complete. Root '{root.key}', created {created_count} categories.")
        )
