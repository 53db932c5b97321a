"""
MediChain: medicine ledger chaincode

MediChain is a smart contract that manages medicine records in the world state of a
permissioned ledger. It ships with local world-state backends and a command-line
runtime for development.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh.readlines() if line.strip() and not line.startswith("#")]

# Get version from the package
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '.'))
from medichain.units.version import get_version, VERSION

setup(
    name="MediChain",
    version=get_version(VERSION),
    author="Nguyễn Lê Văn Dũng",
    description="Medicine ledger chaincode with local world-state runtime",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=['medichain', 'medichain.*'], exclude=['tests*']),
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest>=7.4",
            "hypothesis>=6.80",
        ],
    },
    entry_points={
        "console_scripts": [
            "medichain=medichain.cli:medichain",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Application Frameworks",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    keywords="blockchain, chaincode, smart contract, medicine, ledger",
)
