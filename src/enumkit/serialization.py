"""JSON integration for enum values.

``json`` cannot serialize arbitrary objects, so values are exposed through a
``default=`` hook and an encoder subclass; both emit the canonical scalar::

    json.dumps({"status": Status.draft()}, default=json_default)
    json.dumps({"status": Status.draft()}, cls=EnumJSONEncoder)

Decoding is construction: ``Status.from_value(json.loads(text)["status"])``.

Python 3.13+.
"""

import json
from typing import Any

from enumkit.resolver import Scalar
from enumkit.value import Enum

__all__ = ["EnumJSONEncoder", "json_default"]


def json_default(obj: Any) -> Scalar:
    """``default=`` hook for ``json.dumps``.

    Raises:
        TypeError: If obj is not an enum value (as ``json`` expects)
    """
    if isinstance(obj, Enum):
        return obj.to_json()
    msg = f"Object of type {type(obj).__name__} is not JSON serializable"
    raise TypeError(msg)


class EnumJSONEncoder(json.JSONEncoder):
    """JSON encoder that writes enum values as their canonical scalar."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Enum):
            return o.to_json()
        return super().default(o)
