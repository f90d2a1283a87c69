# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diff_format import Deleted
from .diffing import create_merge_patch
from .filtering import filter_delta
from .log import (
    MatchError, NilMismatchError, SerializationError,
    DeltaComputationError, FilterEncodingError,
)
from .matching import (
    Matcher, MatchResult, equal_object,
    assert_equal_object, assert_not_equal_object,
)
from .options import (
    AllowPaths, IgnorePaths, MatchOptions,
    IGNORE_AUTOGENERATED_METADATA, COMMON_AUTOGENERATED_METADATA_PATHS,
)


__all__ = [
    "__version__",
    "Deleted",
    "create_merge_patch", "filter_delta",
    "Matcher", "MatchResult", "equal_object",
    "assert_equal_object", "assert_not_equal_object",
    "AllowPaths", "IgnorePaths", "MatchOptions",
    "IGNORE_AUTOGENERATED_METADATA", "COMMON_AUTOGENERATED_METADATA_PATHS",
    "MatchError", "NilMismatchError", "SerializationError",
    "DeltaComputationError", "FilterEncodingError",
    ]
