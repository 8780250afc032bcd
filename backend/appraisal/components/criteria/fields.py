"""Mapping between runtime-defined criterion names and the fixed legacy record shape.

Scores are stored one row per (employee, criterion), but downstream consumers
(the SAW ranking, older reports) still read a flat record with 13 named slots.
A criterion name resolves to either a ``KnownField`` (one of those slots) or an
``ExtensionField`` carried in an open-ended mapping.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union

_DISALLOWED_RE = re.compile(r"[^a-z0-9_\s]")
_WHITESPACE_RE = re.compile(r"\s+")
_UNDERSCORES_RE = re.compile(r"_+")


def normalize(name: str) -> str:
    """Stable identifier token for a human-readable criterion name.

    ``normalize("Jumlah  Hari  Alpa!") == "jumlah_hari_alpa"``. Underscores
    survive so that ``normalize`` is idempotent.
    """
    token = (name or "").lower()
    token = _DISALLOWED_RE.sub("", token)
    token = _WHITESPACE_RE.sub("_", token)
    token = token.strip("_")
    return _UNDERSCORES_RE.sub("_", token)


class KnownField(Enum):
    """The 13 named slots of the legacy evaluation record.

    Each member carries (normalized token, storage column, record field, slot default).
    """

    KUALITAS_KERJA = ("kualitas_kerja", "kualitas_kerja", "kualitasKerja", 1.0)
    TANGGUNG_JAWAB = ("tanggung_jawab", "tanggung_jawab", "tanggungJawab", 1.0)
    KUANTITAS_KERJA = ("kuantitas_kerja", "kuantitas_kerja", "kuantitasKerja", 1.0)
    PEMAHAMAN_TUGAS = ("pemahaman_tugas", "pemahaman_tugas", "pemahamanTugas", 1.0)
    INISIATIF = ("inisiatif", "inisiatif", "inisiatif", 1.0)
    KERJASAMA = ("kerjasama", "kerjasama", "kerjasama", 1.0)
    HARI_ALPA = ("jumlah_hari_alpa", "hari_alpa", "hariAlpa", 0.0)
    KETERLAMBATAN = ("jumlah_keterlambatan", "keterlambatan", "keterlambatan", 0.0)
    HARI_IZIN = ("jumlah_hari_izin", "hari_izin", "hariIzin", 0.0)
    HARI_SAKIT = ("jumlah_hari_sakit", "hari_sakit", "hariSakit", 0.0)
    PULANG_CEPAT = ("pulang_cepat", "pulang_cepat", "pulangCepat", 0.0)
    PRESTASI = ("prestasi", "prestasi", "prestasi", 0.0)
    SURAT_PERINGATAN = ("surat_peringatan", "surat_peringatan", "suratPeringatan", 0.0)

    def __init__(self, token: str, storage_field: str, record_field: str, slot_default: float):
        self.token = token
        self.storage_field = storage_field
        self.record_field = record_field
        self.slot_default = slot_default

    @classmethod
    def from_token(cls, token: str) -> Optional["KnownField"]:
        return _FIELDS_BY_TOKEN.get(token)


@dataclass(frozen=True)
class ExtensionField:
    """A criterion outside the legacy slots, keyed by its raw name."""

    name: str

    @property
    def token(self) -> str:
        return normalize(self.name)


RecordField = Union[KnownField, ExtensionField]

_FIELDS_BY_TOKEN: Mapping[str, KnownField] = MappingProxyType({f.token: f for f in KnownField})

STORAGE_FIELDS: Mapping[str, str] = MappingProxyType({f.token: f.storage_field for f in KnownField})
RECORD_FIELDS: Mapping[str, str] = MappingProxyType({f.token: f.record_field for f in KnownField})


def resolve(name: str) -> RecordField:
    known = KnownField.from_token(normalize(name))
    if known is not None:
        return known
    return ExtensionField(name)


def to_storage_field(name: str) -> str:
    token = normalize(name)
    return STORAGE_FIELDS.get(token, token)


def to_record_field(name: str) -> str:
    token = normalize(name)
    return RECORD_FIELDS.get(token, token)


def is_known(name: str) -> bool:
    return isinstance(resolve(name), KnownField)
