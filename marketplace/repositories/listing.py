from marketplace.listing.domain.models import ListingItem, ListingItemTemplate

from .base import Repository


class ListingItemTemplateRepository(Repository[ListingItemTemplate]):
    model = ListingItemTemplate
    select_related = ("payment_information",)


class ListingItemRepository(Repository[ListingItem]):
    model = ListingItem
    select_related = ("listing_item_template", "payment_information")
