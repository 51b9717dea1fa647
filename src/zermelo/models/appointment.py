import dataclasses
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

import pytz

from ..const import TIMEZONE
from .base import ZermeloDataClass


def _wire(*names: str, kind: type) -> Any:
    """Declare an optional field with the wire names it is read from, in order of preference."""
    return field(default=None, metadata={"wire_names": names, "kind": kind})


def _check(name: str, value: Any, kind: type) -> Any:
    # JSON booleans decode to bool, which is also an int subclass
    if kind is int and (isinstance(value, bool) or not isinstance(value, int)):
        raise ValueError(f"{name} must be an integer, got {type(value).__name__}")
    if kind is list:
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ValueError(f"{name} must be a list of strings, got {type(value).__name__}")
        return list(value)
    if kind is not int and not isinstance(value, kind):
        raise ValueError(f"{name} must be of type {kind.__name__}, got {type(value).__name__}")
    return value


def _to_datetime(timestamp: int | None) -> datetime | None:
    if timestamp is None:
        return None
    return datetime.fromtimestamp(timestamp, tz=pytz.timezone(TIMEZONE))


@dataclass
class Appointment(ZermeloDataClass):
    """One scheduled event (lesson, exam, activity, ...) in a timetable.

    The API leaves out whatever it has no value for, so every field is
    optional and ``None`` means "not sent".
    """

    id: int | None = _wire("id", kind=int)
    appointment_instance: int | None = _wire("appointmentInstance", "appointment_instance", kind=int)
    start: int | None = _wire("start", kind=int)
    end: int | None = _wire("end", kind=int)
    start_time_slot: int | None = _wire("startTimeSlot", "start_time_slot", kind=int)
    end_time_slot: int | None = _wire("endTimeSlot", "end_time_slot", kind=int)
    subjects: list[str] | None = _wire("subjects", kind=list)
    teachers: list[str] | None = _wire("teachers", kind=list)
    groups: list[str] | None = _wire("groups", kind=list)
    locations: list[str] | None = _wire("locations", kind=list)
    appointment_type: str | None = _wire("type", "appointment_type", kind=str)
    remark: str | None = _wire("remark", kind=str)
    valid: bool | None = _wire("valid", kind=bool)
    cancelled: bool | None = _wire("cancelled", kind=bool)
    modified: bool | None = _wire("modified", kind=bool)
    moved: bool | None = _wire("moved", kind=bool)
    new: bool | None = _wire("new", kind=bool)
    change_description: str | None = _wire("changeDescription", "change_description", kind=str)
    last_modified: int | None = _wire("lastModified", "last_modified", kind=int)
    branch_of_school: int | None = _wire("branchOfSchool", "branch_of_school", kind=int)
    _raw: dict | None = field(default=None, repr=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Appointment":
        """Build an Appointment from one element of the API's ``data`` list.

        Unknown keys are ignored and ``null`` counts as absent.

        Raises:
            ValueError: If ``data`` is not an object or a field has the wrong JSON type
        """
        if not isinstance(data, dict):
            raise ValueError(f"Appointment must be a JSON object, got {type(data).__name__}")

        values: dict[str, Any] = {}
        for f in dataclasses.fields(cls):
            if f.name == "_raw":
                continue
            for wire_name in f.metadata["wire_names"]:
                if data.get(wire_name) is not None:
                    values[f.name] = _check(wire_name, data[wire_name], f.metadata["kind"])
                    break
        return cls(_raw=data, **values)

    @property
    def sort_key(self) -> int:
        """Start time used for ordering; appointments without one sort first."""
        return self.start if self.start is not None else 0

    @property
    def start_datetime(self) -> datetime | None:
        return _to_datetime(self.start)

    @property
    def end_datetime(self) -> datetime | None:
        return _to_datetime(self.end)

    @property
    def last_modified_datetime(self) -> datetime | None:
        return _to_datetime(self.last_modified)
