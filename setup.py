#!/usr/bin/python3

# Copyright (C) 2007 Google Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
This script can be used to create a source distribution or a wheel of the
transitgraph package and its feedvalidator.py script. The output is put in
dist/
"""

from setuptools import setup

from transitgraph import __version__ as VERSION

setup(
    version=VERSION,
    name="transitgraph",
    description="Loads GTFS transit feeds into an in-memory object graph",
    long_description="This module provides a library for reading a General "
    "Transit Feed Specification feed, from a directory or a zip file, into "
    "validated and cross-referenced Python objects. Invalid rows abort the "
    "load, are repaired with default values or are left out. It includes a "
    "script that loads a feed and reports the first problem found.",
    platforms="OS Independent",
    license="Apache License, Version 2.0",
    packages=["transitgraph"],
    scripts=["feedvalidator.py"],
    python_requires=">=3.6",
    extras_require={"test": ["pytest"]},
    zip_safe=False,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Information Technology",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: GIS",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
