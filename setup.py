#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Setup script for Auto Linker.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="auto_linker",
    version="0.1.0",
    description="Link unlinked mentions and keep a de-duplicated links: line in Obsidian notes",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "python-dotenv>=0.19.0",
        "pyyaml>=6.0",
        "tqdm>=4.61.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "auto-linker=auto_linker.main:main",
        ],
    },
)
