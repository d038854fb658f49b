#!/usr/bin/env python3

from setuptools import setup

setup(
    name="xkpasswd",
    version="0.1.0",
    description="Memorable passphrase generator composed of dictionary words",
    packages=["xkpasswd", "xkpasswd.data"],
    package_data={"xkpasswd.data": ["*.gz"]},
    python_requires=">=3.9",
    extras_require={"test": ["pytest"]},
)
