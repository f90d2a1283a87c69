# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Restricting a delta tree to the paths a comparison cares about.

Paths are tuples of field names. An allow list limits the delta to the
subtrees it names, an ignore list then removes the subtrees it names.
Neither pass ever fails: paths naming structure that is not in the
delta are simply no-ops, so the same lists can be used for objects
that may or may not carry a given field.
"""

import copy

from .diff_format import NodeKind, node_kind
from .log import debug

__all__ = ["filter_delta", "restrict_to_allowed", "remove_path", "WILDCARD", "ALLOW_ALL"]


WILDCARD = "*"

# Allow list with no restriction
ALLOW_ALL = ((WILDCARD,),)


def is_allow_all(allow_paths):
    "Return True if the allow list is the wildcard list."
    return len(allow_paths) == 1 and tuple(allow_paths[0][:1]) == ALLOW_ALL[0]


def restrict_to_allowed(delta, allow_paths):
    """Limit delta in place to those paths in allow_paths.

    A key survives if some allow path starts with it. If one of those
    paths ends at the key, the whole subtree below it is kept. Otherwise
    the subtree is restricted further by the remainders of the paths,
    and dropped if nothing in it survives. Values that are not objects
    cannot be restricted further and are kept as they are.
    """
    if is_allow_all(allow_paths):
        return delta

    for key in list(delta):
        matching = [path for path in allow_paths if path and path[0] == key]
        if not matching:
            del delta[key]
            continue

        # A path ending at key allows the whole subtree, whatever
        # deeper paths say about parts of it
        if any(len(path) == 1 for path in matching):
            continue

        value = delta[key]
        if node_kind(value) != NodeKind.OBJECT:
            continue

        restrict_to_allowed(value, [path[1:] for path in matching])
        if not value:
            del delta[key]

    return delta


def remove_path(delta, path):
    "Remove path from delta in place, pruning objects left empty."
    if len(path) == 0:
        return
    elif len(path) == 1:
        delta.pop(path[0], None)
    else:
        nested = delta.get(path[0])
        if node_kind(nested) != NodeKind.OBJECT:
            return
        remove_path(nested, path[1:])

        # An empty object left behind would still count as a difference
        if not nested:
            del delta[path[0]]


def filter_delta(delta, allow_paths, ignore_paths):
    """Limit delta to allow_paths, then exclude ignore_paths.

    Returns the filtered copy, delta itself is left untouched.
    allow_paths must not be empty, use ALLOW_ALL to allow everything.
    """
    filtered = copy.deepcopy(delta)

    restrict_to_allowed(filtered, allow_paths)

    for path in ignore_paths:
        remove_path(filtered, path)

    debug("Filtered delta from %d to %d top level entries", len(delta), len(filtered))
    return filtered
