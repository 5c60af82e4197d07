"""Tests for selection state transitions."""

from apps.variants.services import (
    clear_attribute,
    extract_options,
    get_selected_value,
    seed_selection,
    select_attribute,
)


class TestSelectAttribute:

    def test_sets_value_on_empty_selection(self):
        assert select_attribute({}, 'size', 'M') == {'size': 'M'}

    def test_none_selection_is_treated_as_empty(self):
        assert select_attribute(None, 'size', 'M') == {'size': 'M'}

    def test_other_attributes_are_kept(self):
        selection = {'size': 'M'}

        result = select_attribute(selection, 'color', 'Blue')

        assert result == {'size': 'M', 'color': 'Blue'}

    def test_changing_one_attribute_does_not_clear_another(self):
        selection = {'size': 'M', 'color': 'Blue'}

        result = select_attribute(selection, 'color', 'Red')

        assert result == {'size': 'M', 'color': 'Red'}

    def test_input_is_not_mutated(self):
        selection = {'size': 'M'}

        select_attribute(selection, 'size', 'L')

        assert selection == {'size': 'M'}

    def test_reselecting_same_value_returns_same_object(self):
        selection = {'size': 'M'}

        assert select_attribute(selection, 'size', 'M') is selection

    def test_dead_end_combination_is_accepted(self, tee_variants):
        options = extract_options(tee_variants)

        # Red XL does not exist, but both values are offered by the catalog
        result = select_attribute({'color': 'Red'}, 'size', 'XL', options=options)

        assert result == {'color': 'Red', 'size': 'XL'}

    def test_value_not_in_catalog_is_rejected(self, tee_variants):
        options = extract_options(tee_variants)
        selection = {'size': 'M'}

        assert select_attribute(selection, 'color', 'Purple', options=options) is selection
        assert select_attribute(selection, 'fit', 'Slim', options=options) is selection

    def test_values_are_coerced_to_strings(self):
        assert select_attribute({}, 'length', 230) == {'length': '230'}

    def test_blank_value_is_ignored(self):
        selection = {'size': 'M'}

        assert select_attribute(selection, 'color', '') is selection
        assert select_attribute(selection, 'color', None) is selection


class TestClearAndSeed:

    def test_clear_attribute(self):
        selection = {'size': 'M', 'color': 'Blue'}

        result = clear_attribute(selection, 'color')

        assert result == {'size': 'M'}
        assert selection == {'size': 'M', 'color': 'Blue'}

    def test_clear_missing_attribute_returns_same_object(self):
        selection = {'size': 'M'}

        assert clear_attribute(selection, 'color') is selection

    def test_seed_keeps_only_catalog_values(self, tee_variants):
        options = extract_options(tee_variants)

        seeded = seed_selection(
            {'size': 'M', 'color': 'Purple', 'price': 999, 'variant_id': 'v3'},
            options,
        )

        assert seeded == {'size': 'M'}

    def test_seed_from_nothing(self, tee_variants):
        assert seed_selection(None, extract_options(tee_variants)) == {}

    def test_get_selected_value(self):
        assert get_selected_value({'size': 'M'}, 'size') == 'M'
        assert get_selected_value({'size': ''}, 'size') is None
        assert get_selected_value(None, 'size') is None
