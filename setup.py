#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

TREEMATCH_PATH = HERE / "treematch"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(TREEMATCH_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='treematch',
      version=VERSION,
      description='Semantic equality of tree-shaped objects for tests, by filtered merge patch',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD-3-Clause',
      packages=find_packages(include=['treematch', 'treematch.*']),
      python_requires='>=3.8',
      install_requires=[
          'nbformat',
          'colorama',
          'traitlets>=5',
          'jupyter_core',
      ],
      extras_require={
          'test': [
              'pytest>=6.0',
          ],
      },
      )
