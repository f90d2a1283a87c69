# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Delta trees in merge-patch form.

A delta tree is a mapping from field name to one of:

- a nested delta tree (the field exists in both objects and differs below),
- the Deleted sentinel (the field was removed),
- any other value (the field was added, or replaced by this value).

Unlike RFC 7386 documents, a None value in a delta tree means the field was
set to null. to_merge_patch/from_merge_patch convert to and from the wire
form where null marks a deletion.
"""

import json

from nbformat import NotebookNode

from .log import DeltaFormatError, FilterEncodingError


class _DeletedType(object):
    "Sentinel marking a field removed from the original object."

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(_DeletedType, cls).__new__(cls)
        return cls._instance

    def __repr__(self):
        return "Deleted"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (_DeletedType, ())


Deleted = _DeletedType()


class NodeKind:
    "Collection of the kinds of node found in a delta tree."
    LEAF = "leaf"
    DELETED = "deleted"
    OBJECT = "object"


def node_kind(node):
    "Classify a delta tree node."
    if node is Deleted:
        return NodeKind.DELETED
    if isinstance(node, dict):
        return NodeKind.OBJECT
    return NodeKind.LEAF


def new_delta(entries=None):
    "Create an (empty) delta object node."
    return NotebookNode(entries or {})


def to_merge_patch(delta):
    "Convert a delta tree to a RFC 7386 merge patch document."
    kind = node_kind(delta)
    if kind == NodeKind.OBJECT:
        return {k: to_merge_patch(v) for k, v in delta.items()}
    elif kind == NodeKind.DELETED:
        return None
    return delta


def from_merge_patch(patch):
    """Convert a RFC 7386 merge patch document to a delta tree.

    Null values are taken to mean deletion, as the RFC specifies.
    """
    if not isinstance(patch, dict):
        raise DeltaFormatError(
            "Merge patch must be a JSON object, got %s" % type(patch).__name__)

    def _convert(value):
        if value is None:
            return Deleted
        if isinstance(value, dict):
            return new_delta({k: _convert(v) for k, v in value.items()})
        return value

    return _convert(patch)


def dumps_delta(delta, indent=None):
    "Render the merge patch form of a delta tree as JSON text."
    try:
        return json.dumps(to_merge_patch(delta), sort_keys=True,
                          indent=indent, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise FilterEncodingError("failed to marshal merge diff: %s" % e) from e


def validate_delta(delta, path="/"):
    """Check that delta is a well formed delta tree: a mapping with
    string keys at every level.

    Raises a DeltaFormatError if not well formed.
    """
    if not isinstance(delta, dict):
        raise DeltaFormatError("Delta at %s must be a mapping." % path)
    for key, value in delta.items():
        if not isinstance(key, str):
            raise DeltaFormatError(
                "Delta key %r at %s is not a string." % (key, path))
        if node_kind(value) == NodeKind.OBJECT:
            validate_delta(value, path.rstrip("/") + "/" + key)
