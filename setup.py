#!/usr/bin/env python3
"""
Setup script for System DNS package.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="system-dns",
    version="1.0.0",
    author="System DNS Team",
    author_email="team@example.com",
    description="Query the DNS servers configured on the host",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/example/system-dns",
    packages=find_packages(include=["system_dns", "system_dns.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Internet :: Name Service (DNS)",
        "Topic :: System :: Networking",
    ],
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "test": ["behave>=1.2.6"],
    },
    entry_points={
        "console_scripts": [
            "system-dns=system_dns.cli.main:main",
        ],
    },
    include_package_data=True,
)
