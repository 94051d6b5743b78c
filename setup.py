#!/usr/bin/env python
# pylint: disable=missing-module-docstring

import os
from typing import List

from setuptools import find_packages, setup

required_packages: List[str]
with open(
    os.path.join(os.path.dirname(__file__), "requirements.txt"), "r", encoding="utf-8"
) as requirements_file:
    required_packages = [
        requirement_entry.strip()
        for requirement_entry in requirements_file.readlines()
        if len(requirement_entry.strip()) > 0
        and not requirement_entry.strip().startswith("#")
    ]

setup(
    name="terminput",
    version="0.1.0",
    description="Validated keystroke-level input for the terminal",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=required_packages,
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["terminput = terminput.entrypoint:main"]},
)
