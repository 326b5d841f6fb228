from dataclasses import replace

from django.test import SimpleTestCase

from apps.storefront.models import PriceRange, ProductSummary
from apps.storefront.services.display import (
    card_prices,
    display_compare_at_price,
    display_price,
    gallery_images,
)

from .factories import image, money, tee_product


def summary(price_range, compare_at_price_range=PriceRange()):
    return ProductSummary(
        id='gid://shopify/Product/1',
        handle='classic-tee',
        title='Classic Tee',
        price_range=price_range,
        compare_at_price_range=compare_at_price_range,
    )


class DisplayPriceTests(SimpleTestCase):
    def test_resolved_variant_price(self):
        tee = tee_product()

        self.assertEqual(display_price(tee, tee.variants[1]), '$12.00')

    def test_falls_back_to_min_price(self):
        self.assertEqual(display_price(tee_product(), None), '$10.00')

    def test_compare_at_price_of_variant(self):
        tee = tee_product()
        blue = tee.variants[3]

        self.assertEqual(display_compare_at_price(tee, blue), '$15.00')

    def test_no_compare_at_price(self):
        tee = tee_product()

        self.assertIsNone(display_compare_at_price(tee, tee.variants[0]))

    def test_compare_at_price_equal_to_price_is_hidden(self):
        tee = tee_product()
        product = replace(
            tee, compare_at_price_range=PriceRange(money('10.00'), money('14.00'))
        )

        self.assertIsNone(display_compare_at_price(product, None))


class CardPricesTests(SimpleTestCase):
    def test_range_without_compare(self):
        price, compare_at = card_prices(summary(PriceRange(money('10'), money('20'))))

        self.assertEqual(price, '$10.00 - $20.00')
        self.assertIsNone(compare_at)

    def test_compare_range_above_price(self):
        price, compare_at = card_prices(summary(
            PriceRange(money('10'), money('10')),
            PriceRange(money('15'), money('15')),
        ))

        self.assertEqual(price, '$10.00')
        self.assertEqual(compare_at, '$15.00')

    def test_compare_range_not_above_price(self):
        _, compare_at = card_prices(summary(
            PriceRange(money('10'), money('20')),
            PriceRange(money('10'), money('25')),
        ))

        self.assertIsNone(compare_at)

    def test_malformed_price(self):
        price, compare_at = card_prices(summary(
            PriceRange(money('abc'), money('20')),
            PriceRange(money('15'), money('25')),
        ))

        self.assertEqual(price, '')
        self.assertIsNone(compare_at)


class GalleryImagesTests(SimpleTestCase):
    def test_featured_image_first(self):
        images = [image('img-back'), image('img-featured')]

        ordered = gallery_images(images, image('img-featured'))

        self.assertEqual([img.id for img in ordered], ['img-featured', 'img-back'])

    def test_variant_image_first(self):
        tee = tee_product()

        ordered = gallery_images(tee.images, tee.featured_image, image('img-blue'))

        self.assertEqual(
            [img.id for img in ordered],
            ['img-blue', 'img-featured', 'img-back']
        )

    def test_first_image_without_featured(self):
        images = [image('img-a'), image('img-b')]

        self.assertEqual(gallery_images(images), images)

    def test_no_images(self):
        self.assertEqual(gallery_images([]), [])
        self.assertEqual(gallery_images([], image('img-featured')), [image('img-featured')])

    def test_repeated_images_are_dropped(self):
        images = [image('img-a'), image('img-b'), image('img-a')]

        ordered = gallery_images(images, image('img-b'))

        self.assertEqual([img.id for img in ordered], ['img-b', 'img-a'])
