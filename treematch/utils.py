# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.


def split_path(path):
    "Split a path on the form '/foo/bar' into ['foo','bar']."
    return [x for x in path.strip("/").split("/") if x]


def as_path(path):
    """Normalize a path to a tuple of segments.

    Strings are split on '/', any other iterable is taken
    segment by segment as given.
    """
    if isinstance(path, str):
        return tuple(split_path(path))
    return tuple(path)


def is_prefix_array(parent, child):
    if parent == child:
        return True
    if not parent:
        return True

    if child is None or len(parent) > len(child):
        return False

    for i in range(len(parent)):
        if parent[i] != child[i]:
            return False
    return True
