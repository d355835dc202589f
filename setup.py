#!/usr/bin/env python3
"""
Entry Store Setup Script
========================
Allows installation of the entry-store package.

Usage:
    pip install -e .           # Development install
    pip install -e ".[test]"   # With test dependencies
    pip install .              # Regular install
"""

from setuptools import setup, find_packages

setup(
    name="entry-store",
    version="1.0.0",
    description="Embeddable in-memory key-value store with scalar and list values, TTL and bounded size",
    packages=find_packages(include=["entrystore", "entrystore.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
        ],
    },
)
