"""Canonical criterion codes and display ordering."""

import random
from types import SimpleNamespace

import pytest

from appraisal.components.criteria.ordering import (
    CanonicalOrderIndex,
    category_weight_totals,
    default_order_index,
    group_by_category,
    sort_criteria,
)
from appraisal.platform.config import DEFAULT_CANONICAL_CRITERIA_ORDER


def _crit(name, category="Kinerja Inti", type="Benefit", weight=10.0):
    return SimpleNamespace(name=name, category=category, type=type, weight=weight)


class TestCodes:
    def test_every_reference_name_gets_its_ordinal_code(self):
        index = CanonicalOrderIndex(DEFAULT_CANONICAL_CRITERIA_ORDER)
        for position, name in enumerate(DEFAULT_CANONICAL_CRITERIA_ORDER):
            assert index.position_of(name) == position
            assert index.code_of(name) == f"C{position + 1}"

    def test_reference_list_has_thirteen_entries(self):
        index = default_order_index()
        assert len(index) == 13
        assert index.code_of("Kualitas Kerja") == "C1"
        assert index.code_of("Jumlah Hari Alpa") == "C7"
        assert index.code_of("Surat Peringatan") == "C13"

    @pytest.mark.parametrize("name", ["Kepemimpinan", "kualitas kerja", "Kualitas Kerja ", ""])
    def test_unknown_name_gets_placeholder_code(self, name):
        index = default_order_index()
        assert index.position_of(name) is None
        assert index.code_of(name) == "C?"

    def test_alternate_ordering_can_be_injected(self):
        index = CanonicalOrderIndex(["Inisiatif", "Kerjasama"])
        assert index.code_of("Inisiatif") == "C1"
        assert index.code_of("Kerjasama") == "C2"
        assert index.code_of("Kualitas Kerja") == "C?"


class TestSorting:
    def test_known_criteria_follow_canonical_positions(self):
        criteria = [_crit("Prestasi"), _crit("Kualitas Kerja"), _crit("Jumlah Hari Alpa")]
        ordered = [c.name for c in sort_criteria(criteria)]
        assert ordered == ["Kualitas Kerja", "Jumlah Hari Alpa", "Prestasi"]

    def test_unknown_criteria_trail_known_ones_sorted_by_name(self):
        criteria = [_crit("Zeta"), _crit("Alpha"), _crit("Surat Peringatan"), _crit("Kerjasama")]
        ordered = [c.name for c in sort_criteria(criteria)]
        assert ordered == ["Kerjasama", "Surat Peringatan", "Alpha", "Zeta"]

    def test_known_precedes_unknown_even_when_unknown_name_sorts_first(self):
        criteria = [_crit("Surat Peringatan"), _crit("AAA")]
        ordered = [c.name for c in sort_criteria(criteria)]
        assert ordered == ["Surat Peringatan", "AAA"]

    def test_sort_is_idempotent(self):
        names = list(DEFAULT_CANONICAL_CRITERIA_ORDER) + ["Disiplin Rapat", "Bahasa Asing"]
        criteria = [_crit(name) for name in names]
        random.Random(7).shuffle(criteria)

        once = sort_criteria(criteria)
        twice = sort_criteria(once)
        assert [c.name for c in once] == [c.name for c in twice]

    def test_result_is_independent_of_input_order(self):
        names = ["Inisiatif", "Zeta", "Kualitas Kerja", "Beta", "Pulang Cepat"]
        expected = ["Kualitas Kerja", "Inisiatif", "Pulang Cepat", "Beta", "Zeta"]
        rng = random.Random(11)
        for _ in range(20):
            criteria = [_crit(name) for name in names]
            rng.shuffle(criteria)
            assert [c.name for c in sort_criteria(criteria)] == expected

    def test_sort_uses_injected_index(self):
        index = CanonicalOrderIndex(["B", "A"])
        ordered = [c.name for c in sort_criteria([_crit("A"), _crit("C"), _crit("B")], index)]
        assert ordered == ["B", "A", "C"]


class TestCategoryGrouping:
    def test_groups_keep_sorted_order_and_first_seen_category_order(self):
        criteria = sort_criteria([
            _crit("Prestasi", category="Faktor Tambahan"),
            _crit("Jumlah Hari Alpa", category="Kedisiplinan", type="Cost"),
            _crit("Kerjasama"),
            _crit("Kualitas Kerja"),
        ])
        grouped = group_by_category(criteria)
        assert list(grouped) == ["Kinerja Inti", "Kedisiplinan", "Faktor Tambahan"]
        assert [c.name for c in grouped["Kinerja Inti"]] == ["Kualitas Kerja", "Kerjasama"]

    def test_weight_totals_are_split_by_type(self):
        totals = category_weight_totals([
            _crit("Prestasi", type="Benefit", weight=50.0),
            _crit("Surat Peringatan", type="Cost", weight=30.0),
            _crit("Lainnya", type="Cost", weight=25.5),
        ])
        assert totals == {"Benefit": 50.0, "Cost": 55.5}
