#!/usr/bin/env python3
"""
Setup script for frameio-b2 package.
"""

from setuptools import setup, find_packages
import os


# Read the README file for long description
def read_readme():
    """Read the README file."""
    readme_path = os.path.join(os.path.dirname(__file__), "README.md")
    if os.path.exists(readme_path):
        with open(readme_path, "r", encoding="utf-8") as f:
            return f.read()
    return "frameio-b2 - Copy assets between Frame.io and Backblaze B2 from custom action callbacks"


setup(
    name="frameio-b2",
    version="1.0.0",
    author="frameio-b2 developers",
    description="Frame.io custom action bridge exporting assets to and importing files from Backblaze B2",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["frameio_b2", "frameio_b2.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Topic :: Multimedia :: Video",
        "Topic :: System :: Archiving :: Backup",
    ],
    python_requires=">=3.11",
    install_requires=[
        "httpx>=0.24.0",
        "pydantic>=2.0.0",
        "click>=8.0.0",
        "boto3>=1.28.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
            "pytest-mock>=3.6",
            "respx>=0.20.0",
            "black>=21.0",
            "flake8>=3.8",
            "mypy>=0.800",
            "pylint>=2.8",
        ],
    },
    entry_points={
        "console_scripts": [
            "frameio-b2=frameio_b2.cli:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
