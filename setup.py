#!/usr/bin/env python3
"""
Setup script for the Media Renaming Tool
"""

from setuptools import setup, find_packages

# Read README for long description
def read_readme():
    with open("README.md", "r", encoding="utf-8") as fh:
        return fh.read()

# Read requirements
def read_requirements():
    with open("requirements.txt", "r", encoding="utf-8") as fh:
        return [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="media-renamer",
    version="1.0.0",
    description="A PyQt6 tool for renaming media files by composing the name from labeled fields",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["media_renamer", "media_renamer.*"]),
    py_modules=["MediaRenamer"],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Multimedia",
        "Topic :: System :: Filesystems",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
        "Environment :: X11 Applications :: Qt",
    ],
    python_requires=">=3.10",
    install_requires=read_requirements(),
    extras_require={
        "dev": [
            "pytest>=6.0.0,<9",
        ],
    },
    entry_points={
        "gui_scripts": [
            "media-renamer=media_renamer.main_application:main",
        ],
    },
    keywords="media rename filename episode series",
)
