# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import pprint
import sys

import colorama

from .diff_format import NodeKind, node_kind


# Indentation offset in pretty-print
IND = "  "

# Max line width used in pretty-print
MAXWIDTH = 78

DIFF_ENTRY_END = '\n'

ColoredConstants = namedtuple('ColoredConstants', (
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(self, out=sys.stdout, use_color=True):
        self.out = out
        self.use_color = use_color

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

DefaultConfig = PrettyPrintConfig()


def format_value(v):
    "Format simple value for printing."
    if isinstance(v, str):
        return v
    return pprint.pformat(v)


def pretty_print_value(value, prefix="", config=DefaultConfig):
    """Print a possibly complex value with all lines prefixed.

    Dicts and lists are printed item by item, simple values
    are printed with format_value.
    """
    if isinstance(value, dict) and value:
        pretty_print_dict(value, prefix, config)
    elif isinstance(value, list) and value:
        pretty_print_list(value, prefix, config)
    else:
        pretty_print_multiline(format_value(value), prefix, config)


def pretty_print_key(k, prefix, config):
    config.out.write("%s%s:\n" % (prefix, k))


def pretty_print_key_value(k, v, prefix, config):
    config.out.write("%s%s: %s\n" % (prefix, k, v))


def pretty_print_diff_action(msg, path, config):
    config.out.write("%s%s %s:%s\n" % (config.INFO, msg, path, config.RESET))


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    if isinstance(v, dict) and v:
        pretty_print_key(k, prefix, config)
        pretty_print_dict(v, prefix+IND, config)
    elif isinstance(v, list) and v:
        pretty_print_key(k, prefix, config)
        pretty_print_list(v, prefix+IND, config)
    else:
        vstr = format_value(v)
        if "\n" in vstr:
            pretty_print_key(k, prefix, config)
            for line in vstr.splitlines(False):
                config.out.write("%s%s\n" % (prefix+IND, line))
        else:
            pretty_print_key_value(k, vstr, prefix, config)


def pretty_print_multiline(text, prefix="", config=DefaultConfig):
    assert isinstance(text, str), 'expected string argument'

    # Preprend prefix to lines, letting lines keep their own newlines
    lines = text.splitlines(True)
    for line in lines:
        config.out.write(prefix + line)

    # If the final line doesn't have a newline,
    # make sure we still start a new line
    if not text.endswith("\n"):
        config.out.write("\n")


def pretty_print_list(li, prefix="", config=DefaultConfig):
    listr = pprint.pformat(li)
    if len(listr) < MAXWIDTH - len(prefix) and "\\n" not in listr:
        config.out.write("%s%s\n" % (prefix, listr))
    else:
        for k, v in enumerate(li):
            pretty_print_item("item[%d]" % k, v, prefix, config)


def pretty_print_dict(d, prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys

    Instead of {'key': 'value'}, do

        key: value
        key:
          long
          value

    """
    for k in sorted(d):
        pretty_print_item(k, d[k], prefix, config)


def pretty_print_delta_entry(a, key, value, path, config=DefaultConfig):
    nextpath = "/".join((path, key))
    kind = node_kind(value)
    has_old = isinstance(a, dict) and key in a

    if kind == NodeKind.OBJECT and has_old and isinstance(a[key], dict):
        pretty_print_delta(a[key], value, nextpath, config)
        return

    if kind == NodeKind.DELETED:
        pretty_print_diff_action("deleted", nextpath, config)
        if has_old:
            pretty_print_value(a[key], config.REMOVE, config)

    elif not has_old:
        pretty_print_diff_action("added", nextpath, config)
        pretty_print_value(value, config.ADD, config)

    else:
        aval = a[key]
        if type(aval) is not type(value):
            typechange = " (type changed from %s to %s)" % (
                aval.__class__.__name__, value.__class__.__name__)
        else:
            typechange = ""
        pretty_print_diff_action("replaced" + typechange, nextpath, config)
        pretty_print_value(aval, config.REMOVE, config)
        pretty_print_value(value, config.ADD, config)

    config.out.write(DIFF_ENTRY_END + config.RESET)


def pretty_print_delta(a, delta, path="", config=DefaultConfig):
    """Pretty-print a delta tree against the object it applies to.

    Parameters
    ----------

    a: dict
        The original (encoded) object
    delta: dict
        The delta tree describing the changes to a
    path: str
        The path of a within the full object, '' for the root
    config: PrettyPrintConfig
        Config object determining where and how things get printed
    """
    for key in sorted(delta):
        pretty_print_delta_entry(a, key, delta[key], path, config)
