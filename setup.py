"""
Setup script for wk-status.

wk-status is a menu-bar plugin (xbar / SwiftBar) for WaniKani. Each run
polls the WaniKani v2 API once and prints:

1. Due reviews - the menu-bar title
2. Reviews and lessons - with shortcuts to start a session
3. Optional sections - SRS stage breakdown, level progress, user info

The 'wk-status' command is the entry point; 'wk_status.15m.py' is the
launcher dropped into the xbar plugins folder.
"""

from setuptools import find_packages, setup

setup(
    name="wk-status",
    version="1.0.0",
    description="WaniKani reviews, lessons and SRS stages for the xbar menu bar",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="cryptxyz",
    url="https://github.com/cryptxyz/wk_status",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        # CLI
        "typer>=0.12.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # HTTP
        "httpx>=0.25.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "wk-status=wkstatus.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Environment :: MacOS X",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
    ],
    keywords="wanikani japanese spaced-repetition xbar swiftbar menu-bar",
)
