""" hdnode build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import hdnode

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=hdnode.name,
    version=hdnode.__version__,
    license=hdnode.__license__,
    author=hdnode.__author__,
    author_email=hdnode.__author_email__,
    description="A library for BIP32 hierarchical deterministic keys",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"hdnode": ["_data/*.json"]},
    include_package_data=True,
    install_requires=["coincurve", "base58", "dataclasses-json"],
    extras_require={"test": ["pytest"]},
    keywords=(
        "bitcoin ethereum cryptography secp256k1 bip32 bip44 "
        "hierarchical-deterministic-wallet extended-keys base58"
    ),
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
