#!/usr/bin/env python

from setuptools import find_packages, setup

setup(
    name="qrisk",
    version="0.0.1",
    description="QRISK2 cardiovascular risk scores (2011, 2012 and 2015 models)",
    packages=find_packages(include=["qrisk", "qrisk.*"]),
    install_requires=[
        "numpy",
        "pandas",
        "pyyaml",
        "tqdm",
    ],
    extras_require={"test": ["pytest"]},
    url="",
)
