from django.contrib import admin

from .models import (
    CryptocurrencyAddress,
    Escrow,
    EscrowRatio,
    ItemCategory,
    ItemPrice,
    ListingItem,
    ListingItemTemplate,
    PaymentInformation,
    ShippingPrice,
)


class EscrowInline(admin.StackedInline):
    model = Escrow
    extra = 0
    readonly_fields = ("created_at", "updated_at")


class ItemPriceInline(admin.TabularInline):
    model = ItemPrice
    extra = 0
    fields = ("currency", "base_price", "created_at")
    readonly_fields = ("created_at",)


class EscrowRatioInline(admin.StackedInline):
    model = EscrowRatio
    extra = 0


class ShippingPriceInline(admin.StackedInline):
    model = ShippingPrice
    extra = 0


class CryptocurrencyAddressInline(admin.StackedInline):
    model = CryptocurrencyAddress
    extra = 0


@admin.register(ItemCategory)
class ItemCategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "key", "parent", "created_at")
    list_filter = ("parent",)
    search_fields = ("name", "key", "description")
    readonly_fields = ("created_at", "updated_at")


@admin.register(ListingItemTemplate)
class ListingItemTemplateAdmin(admin.ModelAdmin):
    list_display = ("id", "hash", "created_at")
    search_fields = ("hash",)


@admin.register(ListingItem)
class ListingItemAdmin(admin.ModelAdmin):
    list_display = ("id", "hash", "listing_item_template", "created_at")
    search_fields = ("hash",)


@admin.register(PaymentInformation)
class PaymentInformationAdmin(admin.ModelAdmin):
    list_display = ("id", "type", "listing_item", "listing_item_template", "created_at")
    list_filter = ("type",)
    readonly_fields = ("created_at", "updated_at")
    inlines = [EscrowInline, ItemPriceInline]


@admin.register(Escrow)
class EscrowAdmin(admin.ModelAdmin):
    list_display = ("id", "type", "payment_information")
    list_filter = ("type",)
    inlines = [EscrowRatioInline]


@admin.register(ItemPrice)
class ItemPriceAdmin(admin.ModelAdmin):
    list_display = ("id", "currency", "base_price", "payment_information")
    list_filter = ("currency",)
    inlines = [ShippingPriceInline, CryptocurrencyAddressInline]
