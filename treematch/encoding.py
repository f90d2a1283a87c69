# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import dataclasses
import datetime
import enum
import json

import nbformat

from .log import SerializationError


__all__ = ["to_tree"]


def _encode_default(obj):
    "Fallback for json.dumps on values it does not know how to encode."
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    to_json = getattr(obj, "__json__", None)
    if callable(to_json):
        return to_json()
    if isinstance(obj, (datetime.datetime, datetime.date, datetime.time)):
        return obj.isoformat()
    if isinstance(obj, enum.Enum):
        return obj.value
    if isinstance(obj, (set, frozenset)):
        return sorted(obj)
    raise TypeError("Object of type %s is not JSON serializable" % type(obj).__name__)


def to_tree(obj):
    """Encode obj as a canonical tree of dicts, lists and json scalars.

    The conversion is a json round trip, so the tree holds exactly what
    a json document for obj would hold. Dicts in the result are
    NotebookNodes, allowing attribute access to fields.

    Keys are kept as the object encodes them. Paths are matched against
    these keys, so objects whose to_dict() gives python attribute names
    (resource_version rather than resourceVersion) must be converted to
    their wire form first for presets such as IGNORE_AUTOGENERATED_METADATA
    to apply.
    """
    try:
        text = json.dumps(obj, default=_encode_default, sort_keys=True, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializationError(
            "failed to encode %s: %s" % (type(obj).__name__, e)) from e
    return nbformat.from_dict(json.loads(text))
