"""Fold flat (employee, criterion, score) rows into one record per employee."""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..criteria.defaults import default_for
from ..criteria.fields import ExtensionField, KnownField, resolve

logger = logging.getLogger("appraisal.evaluations.projector")

EXTENSION_KEY_PREFIX = "extension:"


@dataclass(frozen=True)
class JoinedScore:
    employee_id: str
    employee_name: str
    criteria_id: str
    criteria_name: str
    score: float


@dataclass
class EvaluationRecord:
    employee_id: str
    employee_name: str
    fields: Dict[KnownField, float] = field(default_factory=dict)
    extensions: Dict[str, float] = field(default_factory=dict)

    def value_of(self, criterion_name: str) -> Optional[float]:
        slot = resolve(criterion_name)
        if isinstance(slot, KnownField):
            return self.fields.get(slot)
        return self.extensions.get(slot.name)

    def as_legacy_dict(self) -> Dict[str, Any]:
        """Flat shape read by the ranking and older reports."""
        data: Dict[str, Any] = {"id": self.employee_id, "name": self.employee_name}
        for slot in KnownField:
            data[slot.record_field] = self.fields[slot]
        for name, value in self.extensions.items():
            key = name
            if key in data:
                # Raw name shadows a fixed legacy key; keep both values visible.
                key = f"{EXTENSION_KEY_PREFIX}{name}"
                logger.warning(
                    "Extension criterion %r collides with a legacy field; exposed as %r employee_id=%s",
                    name,
                    key,
                    self.employee_id,
                )
            data[key] = value
        return data


def _slot_defaults(criteria: Optional[Sequence[Any]]) -> Dict[KnownField, float]:
    defaults = {slot: slot.slot_default for slot in KnownField}
    for criterion in criteria or ():
        slot = resolve(criterion.name)
        if isinstance(slot, KnownField):
            defaults[slot] = default_for(criterion)
    return defaults


def _extension_defaults(criteria: Optional[Sequence[Any]]) -> Dict[str, float]:
    defaults: Dict[str, float] = {}
    for criterion in criteria or ():
        slot = resolve(criterion.name)
        if isinstance(slot, ExtensionField):
            defaults[slot.name] = default_for(criterion)
    return defaults


def empty_record(
    employee_id: str,
    employee_name: str,
    criteria: Optional[Sequence[Any]] = None,
) -> EvaluationRecord:
    """A record holding only defaults."""
    return EvaluationRecord(
        employee_id=employee_id,
        employee_name=employee_name,
        fields=_slot_defaults(criteria),
        extensions=_extension_defaults(criteria),
    )


def project(
    rows: Iterable[JoinedScore],
    criteria: Optional[Sequence[Any]] = None,
) -> List[EvaluationRecord]:
    """One ``EvaluationRecord`` per distinct employee, in first-seen order.

    Every known slot always holds a number: the stored score or its default.
    When the current ``criteria`` are given, extension criteria in that set are
    present too, and known-slot defaults follow their configured type and scale.
    """
    slot_defaults = _slot_defaults(criteria)
    extension_defaults = _extension_defaults(criteria)
    records: "OrderedDict[str, EvaluationRecord]" = OrderedDict()

    for row in rows:
        record = records.get(row.employee_id)
        if record is None:
            record = EvaluationRecord(
                employee_id=row.employee_id,
                employee_name=row.employee_name,
                fields=dict(slot_defaults),
                extensions=dict(extension_defaults),
            )
            records[row.employee_id] = record

        slot = resolve(row.criteria_name)
        if isinstance(slot, KnownField):
            record.fields[slot] = float(row.score)
        else:
            record.extensions[row.criteria_name] = float(row.score)

    return list(records.values())
