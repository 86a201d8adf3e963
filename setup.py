#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Setup script for Today I Ran.
"""

from setuptools import setup, find_packages
import re

# Get the version from runcalc/constants.py
with open('runcalc/constants.py', 'r') as f:
    version_file = f.read()
    version_match = re.search(r"VERSION = ['\"]([^'\"]*)['\"]", version_file)
    if version_match:
        version = version_match.group(1)
    else:
        version = '0.0.0'

# Get the long description from README.md
with open('README.md', 'r', encoding='utf-8') as f:
    long_description = f.read()

# Dependencies
REQUIRED = [
    'pyyaml',
    'pandas',
    'rich',
]

# Optional dependencies
EXTRAS = {
    'dev': [
        'pytest',
        'pytest-cov',
        'pytest-mock',
        'flake8',
    ],
}

setup(
    name='today-i-ran',
    version=version,
    description='Average speed, pace and projected race times from the distance you ran and the time you needed',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='Today I Ran Contributors',
    packages=find_packages(exclude=['tests', 'tests.*']),
    py_modules=['today_i_ran'],
    package_data={'runcalc': ['data/*.yaml']},
    include_package_data=True,
    install_requires=REQUIRED,
    extras_require=EXTRAS,
    entry_points={
        'console_scripts': [
            'today-i-ran=today_i_ran:main',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: End Users/Desktop',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
    ],
    python_requires='>=3.8',
    keywords='running, pace, speed, race, calculator',
)
