"""Tests for zermelo.models.base."""

import json
from dataclasses import dataclass, field

from zermelo.models import Appointment
from zermelo.models.base import ZermeloDataClass


@dataclass
class TimeSlot(ZermeloDataClass):
    rank: int = 0
    label: str = ""
    _raw: dict | None = field(default=None, repr=False)


@dataclass
class Timetable(ZermeloDataClass):
    first_slot: TimeSlot | None = None
    slots: list[TimeSlot] = field(default_factory=list)
    _raw: dict | None = field(default=None, repr=False)


def test_dict_of_appointment_skips_raw_payload():
    appt = Appointment.from_dict({"id": 9, "type": "exam", "lastModified": 5})
    result = dict(appt)
    assert "_raw" not in result
    assert result["id"] == 9
    assert result["appointment_type"] == "exam"
    assert result["last_modified"] == 5


def test_dict_of_appointment_is_json_serializable():
    appt = Appointment.from_dict({"id": 9, "subjects": ["wis", "ne"], "cancelled": True})
    assert json.loads(json.dumps(dict(appt)))["subjects"] == ["wis", "ne"]


def test_nested_models_become_dicts():
    timetable = Timetable(
        first_slot=TimeSlot(rank=1, label="u1"),
        slots=[TimeSlot(rank=1, label="u1"), TimeSlot(rank=2, label="u2")],
    )
    result = dict(timetable)
    assert result["first_slot"] == {"rank": 1, "label": "u1"}
    assert result["slots"] == [{"rank": 1, "label": "u1"}, {"rank": 2, "label": "u2"}]


def test_missing_nested_model_stays_none():
    result = dict(Timetable())
    assert result == {"first_slot": None, "slots": []}
