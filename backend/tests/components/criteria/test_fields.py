"""Criterion name normalization and legacy field mapping."""

import pytest

from appraisal.components.criteria.fields import (
    RECORD_FIELDS,
    STORAGE_FIELDS,
    ExtensionField,
    KnownField,
    is_known,
    normalize,
    resolve,
    to_record_field,
    to_storage_field,
)
from appraisal.platform.config import DEFAULT_CANONICAL_CRITERIA_ORDER


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Kualitas Kerja", "kualitas_kerja"),
        ("Jumlah  Hari  Alpa!", "jumlah_hari_alpa"),
        ("  Pulang\tCepat  ", "pulang_cepat"),
        ("Surat_Peringatan", "surat_peringatan"),
        ("__Prestasi__", "prestasi"),
        ("Bahasa (Asing) 2", "bahasa_asing_2"),
        ("a _ b", "a_b"),
        ("", ""),
    ],
)
def test_normalize(raw, expected):
    assert normalize(raw) == expected


def test_normalize_matches_underscored_form():
    assert normalize("Jumlah  Hari  Alpa!") == normalize("jumlah_hari_alpa")


@pytest.mark.parametrize(
    "raw",
    ["Kualitas Kerja", "Jumlah  Hari  Alpa!", "  x  y  ", "A__B", "Kerja-sama Tim", "Ünïcode Name", "__"],
)
def test_normalize_is_idempotent(raw):
    once = normalize(raw)
    assert normalize(once) == once


def test_tables_cover_every_reference_criterion():
    assert len(STORAGE_FIELDS) == 13
    assert len(RECORD_FIELDS) == 13
    for name in DEFAULT_CANONICAL_CRITERIA_ORDER:
        assert normalize(name) in STORAGE_FIELDS
        assert normalize(name) in RECORD_FIELDS


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        STORAGE_FIELDS["kualitas_kerja"] = "x"  # type: ignore[index]


@pytest.mark.parametrize(
    "name, storage, record",
    [
        ("Kualitas Kerja", "kualitas_kerja", "kualitasKerja"),
        ("Jumlah Hari Alpa", "hari_alpa", "hariAlpa"),
        ("Jumlah Keterlambatan", "keterlambatan", "keterlambatan"),
        ("Jumlah Hari Sakit", "hari_sakit", "hariSakit"),
        ("Surat Peringatan", "surat_peringatan", "suratPeringatan"),
    ],
)
def test_known_names_map_to_legacy_fields(name, storage, record):
    assert to_storage_field(name) == storage
    assert to_record_field(name) == record


def test_unknown_names_fall_back_to_normalized_token():
    assert to_storage_field("Kemampuan Bahasa Asing") == "kemampuan_bahasa_asing"
    assert to_record_field("Kemampuan Bahasa Asing") == "kemampuan_bahasa_asing"


def test_resolve_known_and_extension():
    assert resolve("Jumlah Hari Alpa") is KnownField.HARI_ALPA
    assert resolve("jumlah hari alpa") is KnownField.HARI_ALPA

    extension = resolve("Kemampuan Bahasa Asing")
    assert isinstance(extension, ExtensionField)
    assert extension.name == "Kemampuan Bahasa Asing"
    assert extension.token == "kemampuan_bahasa_asing"
    assert not is_known("Kemampuan Bahasa Asing")
    assert is_known("Prestasi")


def test_known_field_slot_defaults():
    benefit_slots = {
        KnownField.KUALITAS_KERJA,
        KnownField.TANGGUNG_JAWAB,
        KnownField.KUANTITAS_KERJA,
        KnownField.PEMAHAMAN_TUGAS,
        KnownField.INISIATIF,
        KnownField.KERJASAMA,
    }
    for slot in KnownField:
        assert slot.slot_default == (1.0 if slot in benefit_slots else 0.0)
