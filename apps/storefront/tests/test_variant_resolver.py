from django.test import SimpleTestCase

from apps.storefront.services.variant_resolver import (
    default_variant,
    resolve_variant,
    variant_matches,
)

from .factories import option, size_scenario, tee_product, variant


class ResolveVariantTests(SimpleTestCase):
    def test_resolves_full_selection(self):
        options, variants = size_scenario()

        resolved = resolve_variant(options, variants, {'Size': 'M'})

        self.assertEqual(resolved.id, 'v-m')
        self.assertEqual(resolved.price.amount, '20.00')

    def test_combination_without_variant(self):
        options, variants = size_scenario()

        self.assertIsNone(resolve_variant(options, variants, {'Size': 'L'}))

    def test_unavailable_variant_still_resolves(self):
        options, variants = size_scenario()

        resolved = resolve_variant(options, variants, {'Size': 'S'})

        self.assertEqual(resolved.id, 'v-s')
        self.assertFalse(resolved.available_for_sale)

    def test_partial_selection_does_not_resolve(self):
        tee = tee_product()

        self.assertIsNone(resolve_variant(tee.options, tee.variants, {'Size': 'M'}))

    def test_multi_option_selection(self):
        tee = tee_product()

        resolved = resolve_variant(
            tee.options, tee.variants, {'Size': 'M', 'Color': 'Blue'}
        )

        self.assertEqual(resolved.id, 'v-m-blue')

    def test_no_options_uses_first_available_variant(self):
        variants = [
            variant('v-1', available=False),
            variant('v-2', available=True),
        ]

        self.assertEqual(resolve_variant((), variants, {}).id, 'v-2')

    def test_no_options_falls_back_to_first_variant(self):
        variants = [variant('v-1', available=False)]

        self.assertEqual(resolve_variant((), variants, {}).id, 'v-1')

    def test_no_variants(self):
        self.assertIsNone(resolve_variant((), (), {}))
        self.assertIsNone(resolve_variant([option('Size', ['M'])], (), {'Size': 'M'}))

    def test_duplicate_combination_uses_first_and_warns(self):
        options = [option('Size', ['M'])]
        variants = [
            variant('v-m-1', {'Size': 'M'}),
            variant('v-m-2', {'Size': 'M'}),
        ]

        with self.assertLogs('apps.storefront.services.variant_resolver', 'WARNING') as logs:
            resolved = resolve_variant(options, variants, {'Size': 'M'})

        self.assertEqual(resolved.id, 'v-m-1')
        self.assertIn('v-m-1, v-m-2', logs.output[0])


class HelperTests(SimpleTestCase):
    def test_variant_matches(self):
        blue = variant('v-m-blue', {'Size': 'M', 'Color': 'Blue'})

        self.assertTrue(variant_matches(blue, {'Size': 'M', 'Color': 'Blue'}))
        self.assertFalse(variant_matches(blue, {'Size': 'M'}))
        self.assertFalse(variant_matches(blue, {'Size': 'M', 'Color': 'Red'}))

    def test_default_variant(self):
        options, variants = size_scenario()

        self.assertEqual(default_variant(variants).id, 'v-m')
        self.assertIsNone(default_variant([]))
