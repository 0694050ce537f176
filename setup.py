#!/usr/bin/env python
# Copyright (C) 2003-2020  CAMP
# Please see the accompanying LICENSE file for further information.

import re
import sys
from pathlib import Path

from setuptools import find_packages, setup

assert sys.version_info >= (3, 8)

# Get the current version number:
txt = Path('molsym/__init__.py').read_text()
version = re.search("__version__ = '(.*)'", txt)[1]
ase_version_required = re.search("__ase_version_required__ = '(.*)'", txt)[1]

description = 'Simplified point-group classification of molecules'
long_description = Path('README.rst').read_text()

setup(name='molsym',
      version=version,
      description=description,
      long_description=long_description,
      license='GPLv3+',
      platforms=['unix'],
      packages=find_packages(),
      entry_points={
          'console_scripts': ['molsym = molsym.point_groups.cli:main']},
      python_requires='>=3.8',
      install_requires=['numpy>=1.21',
                        f'ase>={ase_version_required}',
                        'scipy>=1.2.0'],
      extras_require={'test': ['pytest'],
                      'devel': ['flake8',
                                'mypy',
                                'pytest-xdist',
                                'interrogate']},
      classifiers=[
          'License :: OSI Approved :: '
          'GNU General Public License v3 or later (GPLv3+)',
          'Operating System :: OS Independent',
          'Programming Language :: Python :: 3',
          'Topic :: Scientific/Engineering :: Chemistry'])
