#!/usr/bin/env python3
"""
String Store Setup Script
=========================
Allows installation of the string-store package.

Usage:
    pip install -e .           # Development install
    pip install -e ".[test]"   # With test dependencies
"""

from setuptools import setup, find_packages

setup(
    name="string-store",
    version="1.0.0",
    packages=find_packages(include=["string_store", "string_store.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
        ],
    },
    entry_points={
        "console_scripts": [
            "string-store=string_store.server:main",
        ],
    },
)
