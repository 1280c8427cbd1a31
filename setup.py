#!/usr/bin/env python3

import pathlib

from setuptools import find_packages, setup

HERE = pathlib.Path(__file__).parent

# Handle README.md that might not exist in Docker build
try:
    README = (HERE / "README.md").read_text()
except FileNotFoundError:
    README = "File Encryption & Randomness Observer: signature and entropy based file triage"

setup(
    name="enro",
    version="1.0.0",
    description="File Encryption & Randomness Observer: signature and entropy based file triage",
    long_description=README,
    long_description_content_type="text/markdown",
    author="The enro authors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Information Technology",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.13",
        "Topic :: Security",
        "Topic :: Utilities",
    ],
    python_requires=">=3.10",
    install_requires=[
        "pyfiglet>=0.8.post1",
        "rich>=13.7.0",
        "click>=8.1.7",
        "psutil>=5.9.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "enro=enro.__main__:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
