# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .mergepatch import create_merge_patch, diff_dicts

__all__ = ["create_merge_patch", "diff_dicts"]
