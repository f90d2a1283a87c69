# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import warning
from .utils import as_path, is_prefix_array

__all__ = [
    "MatchOption", "MatchOptions", "AllowPaths", "IgnorePaths",
    "IGNORE_AUTOGENERATED_METADATA", "COMMON_AUTOGENERATED_METADATA_PATHS",
    "overlapping_allow_paths",
]


class MatchOption(object):
    "An option that can be applied to a Matcher."

    def apply_to_matcher(self, options):
        raise NotImplementedError


class MatchOptions(object):
    "The allow and ignore paths collected from a list of MatchOptions."

    def __init__(self):
        self.allow_paths = []
        self.ignore_paths = []

    def apply_options(self, opts):
        for opt in opts:
            opt.apply_to_matcher(self)
        return self

    def __repr__(self):
        return "MatchOptions(allow_paths=%r, ignore_paths=%r)" % (
            self.allow_paths, self.ignore_paths)


class _PathsOption(list, MatchOption):

    def __init__(self, paths=()):
        paths = list(paths)
        super(_PathsOption, self).__init__(as_path(p) for p in paths)
        # ["metadata", "uid"] is two top-level paths, not one nested path
        if len(paths) > 1 and all(isinstance(p, str) and "/" not in p for p in paths):
            warning("%s(%r) names %d top-level fields. Write a nested path "
                    "as '/%s' or as a sequence of segments.",
                    type(self).__name__, paths, len(paths), "/".join(paths))


class IgnorePaths(_PathsOption):
    """Ignore the given paths when computing a diff.

    Paths are sequences of field names, or strings on the form '/foo/bar'.
    Each string is a whole path: IgnorePaths(["metadata", "uid"]) ignores
    the top-level fields metadata and uid, use IgnorePaths(["/metadata/uid"])
    or IgnorePaths([("metadata", "uid")]) for the nested field.
    """

    def apply_to_matcher(self, options):
        options.ignore_paths.extend(self)


class AllowPaths(_PathsOption):
    """Restrict the diff to the given paths.

    Paths take the same forms as for IgnorePaths. If no paths are
    allowed at all, every path is compared.
    """

    def apply_to_matcher(self, options):
        options.allow_paths.extend(self)


# Metadata fields commonly set by the client and API server rather
# than the user, for comparisons where only user set metadata matters.
IGNORE_AUTOGENERATED_METADATA = IgnorePaths([
    ("metadata", "uid"),
    ("metadata", "generation"),
    ("metadata", "creationTimestamp"),
    ("metadata", "resourceVersion"),
    ("metadata", "managedFields"),
    ("metadata", "deletionGracePeriodSeconds"),
    ("metadata", "deletionTimestamp"),
    ("metadata", "selfLink"),
    ("metadata", "generateName"),
])

COMMON_AUTOGENERATED_METADATA_PATHS = IGNORE_AUTOGENERATED_METADATA


def overlapping_allow_paths(allow_paths):
    """Find allow paths hidden by a shorter allow path.

    An allow path ending at a field keeps that field whole, so any longer
    path through the same field has no effect. Returns each distinct
    (shorter, longer) pair once, in the order they are found.
    """
    overlaps = []
    for shorter in allow_paths:
        if not shorter:
            continue
        for longer in allow_paths:
            if len(longer) > len(shorter) and is_prefix_array(shorter, longer):
                pair = (tuple(shorter), tuple(longer))
                if pair not in overlaps:
                    overlaps.append(pair)
    return overlaps
