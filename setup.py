#!/usr/bin/env python3
"""
Setup script for the Stable Summation Library

Builds the pure-Python package for numerically stable summation and
moment statistics with Kahan-Babuska error correction.
"""

from pathlib import Path

from setuptools import setup, find_packages

# Package metadata
PACKAGE_NAME = "stable-summation"
VERSION = "1.0.0"
DESCRIPTION = "Numerically stable summation and variance with Kahan-Babuska compensation"
AUTHOR = "Stable Summation Contributors"
LICENSE = "MIT"

# Read long description from README
def read_readme():
    readme_path = Path(__file__).parent / "README.md"
    if readme_path.exists():
        with open(readme_path, "r", encoding="utf-8") as f:
            return f.read()
    return DESCRIPTION

# Package requirements
def get_requirements():
    """Get package requirements."""
    base_requirements = [
        "numpy>=1.19.0",
        "torch>=1.9.0",
    ]

    dev_requirements = [
        "pytest>=6.0",
        "pytest-cov>=2.0",
        "pandas>=1.3",
    ]

    return {
        "base": base_requirements,
        "dev": dev_requirements,
    }

# Setup configuration
def main():
    """Main setup function."""
    requirements = get_requirements()

    setup(
        name=PACKAGE_NAME,
        version=VERSION,
        description=DESCRIPTION,
        long_description=read_readme(),
        long_description_content_type="text/markdown",
        author=AUTHOR,
        license=LICENSE,

        # Package configuration
        packages=find_packages(include=["stablesum", "stablesum.*"]),

        # Dependencies
        install_requires=requirements["base"],
        extras_require={
            "dev": requirements["dev"],
        },
        python_requires=">=3.8",

        classifiers=[
            "Development Status :: 5 - Production/Stable",
            "Intended Audience :: Science/Research",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: MIT License",
            "Programming Language :: Python :: 3",
            "Topic :: Scientific/Engineering :: Mathematics",
            "Topic :: Software Development :: Libraries :: Python Modules",
            "Operating System :: OS Independent",
        ],
        keywords=[
            "numerical", "summation", "kahan", "babuska", "neumaier",
            "floating-point", "variance", "statistics"
        ],
    )

if __name__ == "__main__":
    main()
