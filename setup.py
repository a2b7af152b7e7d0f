# setup.py
from setuptools import setup, find_packages

setup(
    name="site_mapper",
    version="0.1.0",
    description="Concurrent single-site crawler producing a sitemap of page links",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "click>=8.1",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "tests": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "site-mapper=site_mapper.cli:main",
        ],
    },
    python_requires=">=3.11",
)
