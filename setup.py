# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

import os
import re

from setuptools import find_packages, setup


def read_version():
    init_path = os.path.join(os.path.dirname(__file__), "tensorlayout", "__init__.py")
    with open(init_path, encoding="utf-8") as f:
        match = re.search(r'^__version__ = "([^"]+)"', f.read(), re.MULTILINE)
    if not match:
        raise RuntimeError("Unable to find __version__ in tensorlayout/__init__.py")
    return match.group(1)


setup(
    name="tensorlayout",
    version=read_version(),
    description="Tensor layout conversion and debug dumps for inference drivers",
    author="Wahyu Ardiansyah",
    license="Apache-2.0",
    python_requires=">=3.10",
    packages=find_packages(include=["tensorlayout", "tensorlayout.*"]),
    install_requires=[
        "numpy>=1.24",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "tensorlayout=tensorlayout.cli:main",
        ],
    },
)
