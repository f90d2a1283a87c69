# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
import json
import pickle

import pytest

from treematch.diff_format import (
    Deleted, NodeKind, node_kind, to_merge_patch, from_merge_patch,
    dumps_delta, validate_delta,
)
from treematch.log import DeltaFormatError, FilterEncodingError


def test_deleted_is_singleton():
    assert copy.copy(Deleted) is Deleted
    assert copy.deepcopy({"a": Deleted})["a"] is Deleted
    assert pickle.loads(pickle.dumps(Deleted)) is Deleted
    assert Deleted is not None
    assert repr(Deleted) == "Deleted"


def test_node_kind():
    assert node_kind(Deleted) == NodeKind.DELETED
    assert node_kind({}) == NodeKind.OBJECT
    assert node_kind({"a": 1}) == NodeKind.OBJECT
    assert node_kind(None) == NodeKind.LEAF
    assert node_kind([1, 2]) == NodeKind.LEAF
    assert node_kind("text") == NodeKind.LEAF


def test_merge_patch_conversion():
    delta = {"a": Deleted, "b": {"c": 1, "d": Deleted}, "e": [1]}
    patch = to_merge_patch(delta)
    assert patch == {"a": None, "b": {"c": 1, "d": None}, "e": [1]}

    back = from_merge_patch(patch)
    assert back == delta
    assert back.b.c == 1


def test_from_merge_patch_requires_object():
    with pytest.raises(DeltaFormatError):
        from_merge_patch([1, 2])


def test_dumps_delta():
    text = dumps_delta({"b": Deleted, "a": {"c": None}})
    assert text == '{"a": {"c": null}, "b": null}'
    assert json.loads(dumps_delta({}, indent=2)) == {}


def test_dumps_delta_failure():
    with pytest.raises(FilterEncodingError):
        dumps_delta({"a": object()})
    with pytest.raises(FilterEncodingError):
        dumps_delta({"a": float("nan")})


def test_validate_delta():
    validate_delta({})
    validate_delta({"a": {"b": Deleted}, "c": {}})
    with pytest.raises(DeltaFormatError):
        validate_delta([])
    with pytest.raises(DeltaFormatError):
        validate_delta({"a": {1: "b"}})
