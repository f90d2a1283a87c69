# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging

from treematch.options import (
    AllowPaths, IgnorePaths, MatchOptions,
    IGNORE_AUTOGENERATED_METADATA, COMMON_AUTOGENERATED_METADATA_PATHS,
    overlapping_allow_paths,
)


def test_paths_are_normalized():
    assert AllowPaths([["spec", "replicas"], "/metadata/name", "status"]) == [
        ("spec", "replicas"), ("metadata", "name"), ("status",)]
    assert IgnorePaths(["/"]) == [()]
    assert IgnorePaths() == []


def test_apply_options_appends_in_order():
    opts = MatchOptions().apply_options([
        IgnorePaths([("metadata", "uid")]),
        AllowPaths([("spec",)]),
        IgnorePaths([("status",), ("metadata", "uid")]),
        AllowPaths([("metadata",)]),
    ])
    assert opts.allow_paths == [("spec",), ("metadata",)]
    # No de-duplication
    assert opts.ignore_paths == [("metadata", "uid"), ("status",), ("metadata", "uid")]


def test_apply_no_options():
    opts = MatchOptions().apply_options([])
    assert opts.allow_paths == []
    assert opts.ignore_paths == []


def test_apply_options_does_not_share_lists():
    option = IgnorePaths([("a",)])
    opts = MatchOptions().apply_options([option])
    opts.ignore_paths.append(("b",))
    assert option == [("a",)]


def test_autogenerated_metadata_preset():
    assert COMMON_AUTOGENERATED_METADATA_PATHS is IGNORE_AUTOGENERATED_METADATA
    assert isinstance(IGNORE_AUTOGENERATED_METADATA, IgnorePaths)
    assert ("metadata", "uid") in IGNORE_AUTOGENERATED_METADATA
    assert ("metadata", "managedFields") in IGNORE_AUTOGENERATED_METADATA
    assert ("metadata", "name") not in IGNORE_AUTOGENERATED_METADATA
    assert all(len(path) == 2 and path[0] == "metadata"
               for path in IGNORE_AUTOGENERATED_METADATA)

    opts = MatchOptions().apply_options([
        IGNORE_AUTOGENERATED_METADATA, IgnorePaths([("status",)])])
    assert len(opts.ignore_paths) == len(IGNORE_AUTOGENERATED_METADATA) + 1
    assert opts.ignore_paths[-1] == ("status",)


def test_overlapping_allow_paths():
    assert overlapping_allow_paths([("spec",), ("status",)]) == []
    assert overlapping_allow_paths([("x", "y"), ("x",)]) == [(("x",), ("x", "y"))]
    assert overlapping_allow_paths([("a",), ("a", "b"), ("a", "b", "c")]) == [
        (("a",), ("a", "b")),
        (("a",), ("a", "b", "c")),
        (("a", "b"), ("a", "b", "c")),
    ]
    # Identical paths and empty paths hide nothing
    assert overlapping_allow_paths([("a",), ("a",), ()]) == []
    assert overlapping_allow_paths([("a",), ("a", "b"), ("a", "b")]) == [
        (("a",), ("a", "b"))]


def test_bare_field_names_warn(caplog):
    with caplog.at_level(logging.WARNING, logger="treematch"):
        option = IgnorePaths(["metadata", "uid"])
    assert option == [("metadata",), ("uid",)]
    assert "top-level fields" in caplog.text
    assert "'/metadata/uid'" in caplog.text

    caplog.clear()
    with caplog.at_level(logging.WARNING, logger="treematch"):
        IgnorePaths(["/metadata/uid", "/status"])
        AllowPaths(["status"])
        AllowPaths([("metadata", "uid")])
    assert caplog.text == ""
