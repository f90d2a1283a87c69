# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from treematch.diff_format import validate_delta
from treematch.filtering import filter_delta, ALLOW_ALL


def check_filter(delta, expected, allow_paths=ALLOW_ALL, ignore_paths=()):
    """Check that filtering delta gives expected, and that filtering is
    idempotent and leaves its input alone."""
    before = copy.deepcopy(delta)
    filtered = filter_delta(delta, allow_paths, ignore_paths)
    validate_delta(filtered)
    assert filtered == expected
    assert delta == before
    assert filter_delta(filtered, allow_paths, ignore_paths) == filtered
    return filtered
