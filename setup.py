#!/usr/bin/env python

from setuptools import setup

setup(
    name="bundlerer",
    version="0.1.0",
    packages=[
        "bundlerer",
        "bundlerer.details",
        "bundlerer.details.targets",
        "bundlerer.details.tools",
        "bundlerer.generators",
        "bundlerer.generators.accessors",
        "bundlerer.mappers",
    ],
    python_requires=">=3.9",
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["bundlerer = bundlerer.__main__:main"]},
)
