# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import Deleted, new_delta, validate_delta
from ..log import DeltaComputationError, debug

__all__ = ["create_merge_patch"]


def _json_type(value):
    "Name the json type of value, treating int and float as one number type."
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    if value is None:
        return "null"
    return type(value).__name__


def values_equal(a, b):
    """Compare two json values the way a json document would.

    Unlike ==, True and 1 are different values, while 1 and 1.0 are not.
    """
    ta = _json_type(a)
    if ta != _json_type(b):
        return False
    if ta == "object":
        if set(a) != set(b):
            return False
        return all(values_equal(a[k], b[k]) for k in a)
    if ta == "array":
        if len(a) != len(b):
            return False
        return all(values_equal(x, y) for x, y in zip(a, b))
    return a == b


def diff_dicts(a, b, path=""):
    """Compute the merge patch turning dict a into dict b.

    Keys only in a are marked Deleted, keys only in b carry their value.
    Keys in both are recursed into if both values are dicts, and
    otherwise carry the value from b if it differs from the value in a.
    Lists are never diffed item by item, a changed list is replaced whole.
    """
    if not isinstance(a, dict) or not isinstance(b, dict):
        raise TypeError('Arguments to diff_dicts need to be dicts, got %r and %r' % (a, b))
    akeys = set(a.keys())
    bkeys = set(b.keys())

    delta = new_delta()

    # Sorting keys in loops to get a deterministic diff result
    for key in sorted(akeys - bkeys):
        delta[key] = Deleted

    for key in sorted(akeys & bkeys):
        avalue = a[key]
        bvalue = b[key]
        if isinstance(avalue, dict) and isinstance(bvalue, dict):
            subpath = "/".join((path, key))
            dd = diff_dicts(avalue, bvalue, path=subpath)
            if dd:
                delta[key] = dd
        elif not values_equal(avalue, bvalue):
            delta[key] = bvalue

    for key in sorted(bkeys - akeys):
        delta[key] = b[key]

    return delta


def create_merge_patch(a, b):
    "Compute the delta tree between two encoded objects."
    if not isinstance(a, dict) or not isinstance(b, dict):
        raise DeltaComputationError(
            "Can only compute a merge patch between two objects, got %s and %s." % (
                type(a).__name__, type(b).__name__))
    try:
        delta = diff_dicts(a, b)
    except TypeError as e:
        raise DeltaComputationError("failed to create merge patch: %s" % e) from e

    # We can turn this off for performance after the library has been well tested:
    validate_delta(delta)

    debug("Merge patch has %d top level entries", len(delta))
    return delta
