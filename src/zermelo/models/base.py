import dataclasses
from dataclasses import dataclass


@dataclass
class ZermeloDataClass:
    """Base for API models.

    Iterating a model gives ``(field, value)`` pairs, so ``dict(appointment)``
    is a plain mapping of the domain fields. The untouched API payload in
    ``_raw`` is left out, and nested models become dicts themselves.
    """

    def __iter__(self):
        for f in dataclasses.fields(self):
            if f.name == "_raw":
                continue
            yield f.name, self._plain(getattr(self, f.name))

    @staticmethod
    def _plain(value):
        if isinstance(value, ZermeloDataClass):
            return dict(value)
        if isinstance(value, list):
            return [dict(item) if isinstance(item, ZermeloDataClass) else item for item in value]
        return value
