from rest_framework import serializers

from apps.storefront.services.display import display_compare_at_price, display_price
from apps.storefront.utils.format import format_price, format_price_range


# =============================================================================
# Value Serializers
# =============================================================================

class MoneySerializer(serializers.Serializer):
    amount = serializers.CharField()
    currency_code = serializers.CharField()
    formatted = serializers.SerializerMethodField()

    def get_formatted(self, obj):
        return format_price(obj)


class PriceRangeSerializer(serializers.Serializer):
    min_variant_price = MoneySerializer(allow_null=True)
    max_variant_price = MoneySerializer(allow_null=True)
    formatted = serializers.SerializerMethodField()

    def get_formatted(self, obj):
        return format_price_range(obj.min_variant_price, obj.max_variant_price)


class ImageSerializer(serializers.Serializer):
    id = serializers.CharField(allow_null=True)
    url = serializers.CharField()
    alt_text = serializers.CharField(allow_null=True)
    width = serializers.IntegerField(allow_null=True)
    height = serializers.IntegerField(allow_null=True)


# =============================================================================
# Variant Serializers
# =============================================================================

class SelectedOptionSerializer(serializers.Serializer):
    name = serializers.CharField()
    value = serializers.CharField()


class ProductVariantSerializer(serializers.Serializer):
    id = serializers.CharField()
    title = serializers.CharField()
    available_for_sale = serializers.BooleanField()
    quantity_available = serializers.IntegerField(allow_null=True)
    price = MoneySerializer()
    compare_at_price = MoneySerializer(allow_null=True)
    is_on_sale = serializers.BooleanField(read_only=True)
    selected_options = SelectedOptionSerializer(many=True)
    image = ImageSerializer(allow_null=True)


# =============================================================================
# Product Serializers
# =============================================================================

class ProductOptionSerializer(serializers.Serializer):
    id = serializers.CharField(allow_null=True)
    name = serializers.CharField()
    values = serializers.ListField(child=serializers.CharField())


class ProductSummarySerializer(serializers.Serializer):
    """Product card for the collection grid."""
    id = serializers.CharField()
    handle = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField()
    featured_image = ImageSerializer(allow_null=True)
    price_range = PriceRangeSerializer()
    compare_at_price_range = PriceRangeSerializer()
    options = ProductOptionSerializer(many=True)
    available_for_sale = serializers.BooleanField(allow_null=True)


class ProductDetailSerializer(serializers.Serializer):
    """Full product detail with options and variants."""
    id = serializers.CharField()
    handle = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField()
    description_html = serializers.CharField()
    vendor = serializers.CharField()
    tags = serializers.ListField(child=serializers.CharField())
    featured_image = ImageSerializer(allow_null=True)
    images = ImageSerializer(many=True)
    options = ProductOptionSerializer(many=True)
    price_range = PriceRangeSerializer()
    compare_at_price_range = PriceRangeSerializer()
    variants = ProductVariantSerializer(many=True)


class CollectionSerializer(serializers.Serializer):
    id = serializers.CharField()
    handle = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField()
    products = ProductSummarySerializer(many=True)


# =============================================================================
# Selection Serializer
# =============================================================================

class SelectionStateSerializer(serializers.Serializer):
    """
    Variant selection state of a product.
    Expects the SelectionState in `instance` and the product in context.
    """
    selected_options = serializers.DictField(child=serializers.CharField())
    resolved_variant = ProductVariantSerializer(allow_null=True)
    price = serializers.CharField(allow_null=True)
    formatted_price = serializers.SerializerMethodField()
    compare_at_price = serializers.SerializerMethodField()
    selected_variant_image = ImageSerializer(allow_null=True)
    can_add_to_bag = serializers.BooleanField(read_only=True)
    options = serializers.SerializerMethodField()

    def get_formatted_price(self, obj):
        return display_price(self.context['product'], obj.resolved_variant)

    def get_compare_at_price(self, obj):
        return display_compare_at_price(self.context['product'], obj.resolved_variant)

    def get_options(self, obj):
        availability = self.context.get('availability', {})
        return [
            {
                'name': option.name,
                'selected_value': obj.selected_options.get(option.name),
                'values': [
                    {
                        'value': value,
                        'is_available': availability.get(option.name, {}).get(value, False),
                        'is_selected': obj.selected_options.get(option.name) == value,
                    }
                    for value in option.values
                ],
            }
            for option in self.context['product'].options
        ]
