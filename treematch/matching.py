# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
from io import StringIO
import pprint

from .config import Namespace, cached_config
from .diff_format import new_delta, dumps_delta, validate_delta
from .diffing import create_merge_patch
from .encoding import to_tree
from .filtering import ALLOW_ALL, filter_delta
from .log import MatchError, NilMismatchError, DeltaComputationError, debug, warning
from .options import MatchOptions, overlapping_allow_paths
from .prettyprint import PrettyPrintConfig, pretty_print_delta

__all__ = [
    "Matcher", "MatchResult", "equal_object",
    "assert_equal_object", "assert_not_equal_object",
]


class MatchResult(namedtuple('MatchResult', ('success', 'delta', 'error'))):
    """The outcome of comparing an object to the original of a Matcher.

    success: whether the objects match
    delta: the filtered delta tree, or None if the objects could not be compared
    error: the NilMismatchError if exactly one of the objects was None
    """
    __slots__ = ()

    def __bool__(self):
        return self.success


def format_message(actual, message, expected):
    return "Expected\n%s\n%s\n%s" % (
        _indent(pprint.pformat(actual)), message, _indent(pprint.pformat(expected)))


def _indent(text, prefix="    "):
    return "\n".join(prefix + line for line in text.splitlines())


class Matcher(object):
    """Establishes equality between an original object and other objects.

    Objects are encoded to json trees and compared by their merge patch,
    limited to the paths allowed and not ignored by the given options.
    """

    def __init__(self, original, *opts, differ=None, config=None):
        self.original = original
        self.options = MatchOptions().apply_options(opts)
        self.differ = differ or create_merge_patch
        if config is None:
            config = Namespace(cached_config('match'))
        self.config = config

        # Compare all paths unless told otherwise
        if not self.options.allow_paths:
            self.options.allow_paths = list(ALLOW_ALL)

        if self.config.warn_overlapping_allow_paths:
            for shorter, longer in overlapping_allow_paths(self.options.allow_paths):
                warning("Allow path %r has no effect, as %r allows the whole of %r",
                        longer, shorter, shorter[-1])

    def match(self, actual):
        """Compare actual to the original object.

        Returns a MatchResult. Errors encoding the objects or computing
        their diff are raised.
        """
        # Nil checks required first here for:
        #     1) Nil equality which returns true
        #     2) One object nil which returns an error
        if actual is None and self.original is None:
            return MatchResult(True, new_delta(), None)
        if actual is None or self.original is None:
            debug("Can not compare %r to %r", actual, self.original)
            err = NilMismatchError(
                "can not compare an object with a nil. original %r , actual %r" % (
                    self.original, actual))
            return MatchResult(False, None, err)

        delta = self.calculate_diff(actual)
        return MatchResult(not delta, delta, None)

    def calculate_diff(self, actual):
        "Compute the diff from the original object to actual, limited by the options."
        original_tree = to_tree(self.original)
        actual_tree = to_tree(actual)

        try:
            delta = self.differ(original_tree, actual_tree)
            validate_delta(delta)
        except MatchError:
            raise
        except Exception as e:
            raise DeltaComputationError("failed to compute diff: %s" % e) from e

        return filter_delta(delta, self.options.allow_paths, self.options.ignore_paths)

    def explain_mismatch(self, actual):
        "Describe the fields where actual and the original object differ."
        result = self.match(actual)
        if result.error is not None:
            return str(result.error)
        if result.success:
            return ""
        out = StringIO()
        config = PrettyPrintConfig(out=out, use_color=self.config.use_color)
        pretty_print_delta(to_tree(self.original), result.delta, "", config)
        return out.getvalue()

    def failure_message(self, actual):
        "Message for an unexpected failure to match."
        result = self.match(actual)
        if result.error is not None:
            return str(result.error)
        return "the following fields were expected to match but did not:\n%s\n%s" % (
            dumps_delta(result.delta, indent=2),
            format_message(actual, "to match", self.original))

    def negated_failure_message(self, actual):
        "Message for an unexpected match."
        result = self.match(actual)
        return "the following fields were not expected to match:\n%s\n%s" % (
            dumps_delta(result.delta if result.delta is not None else {}, indent=2),
            format_message(actual, "not to match", self.original))


def equal_object(original, *opts, **kwargs):
    "Return a Matcher comparing objects to original with the given options."
    return Matcher(original, *opts, **kwargs)


def assert_equal_object(actual, original, *opts, **kwargs):
    """Assert that actual matches original under the given options.

    Raises AssertionError describing the mismatching fields otherwise.
    """
    matcher = Matcher(original, *opts, **kwargs)
    result = matcher.match(actual)
    if result.error is not None:
        raise AssertionError(str(result.error)) from result.error
    if not result.success:
        raise AssertionError(matcher.failure_message(actual))
    return result


def assert_not_equal_object(actual, original, *opts, **kwargs):
    "Assert that actual does not match original under the given options."
    matcher = Matcher(original, *opts, **kwargs)
    result = matcher.match(actual)
    if result.error is not None:
        raise AssertionError(str(result.error)) from result.error
    if result.success:
        raise AssertionError(matcher.negated_failure_message(actual))
    return result
