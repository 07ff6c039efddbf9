#!/usr/bin/env python3
# coding: utf-8

from setuptools import setup


setup(
    name='whatadistro',
    version="0.1.0",
    python_requires=">= 3.12",
    description="Identify the running Linux distribution and its family",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    install_requires=["coloredlogs", "texttable", "pyyaml"],
    packages=['whatadistro', "whatadistro.cli"],
    entry_points={
        "console_scripts": [
            "whatadistro=whatadistro.__main__:script_main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
        "Topic :: System :: Operating Systems",
    ],
)
