from __future__ import annotations

import os

from setuptools import setup


def read_version() -> str:
    """Read the version, preferring the PKG_VERSION environment variable."""
    env_version = os.getenv("PKG_VERSION", "").strip()
    if env_version:
        return env_version.lstrip("v")
    return "1.0.0"


setup(
    name="numberset-codec",
    version=read_version(),
    description="Compact hybrid bitset/delta-varint serialization of integer sets in [1, 300].",
    long_description="Compact hybrid bitset/delta-varint serialization of integer sets in [1, 300].",
    long_description_content_type="text/plain",
    packages=["numberset_codec"],
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "numberset-codec=numberset_codec.cli:main",
        ],
    },
)
