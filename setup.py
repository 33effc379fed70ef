# setup.py
from setuptools import setup, find_packages

setup(
    name="sitemap_crawler",
    version="0.1.0",
    description="Асинхронный обход URL из sitemap с ограничением параллельности",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "aiohttp>=3.9",
        "click>=8.1",
        "lxml>=5.0",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "sitemap-crawler=sitemap_crawler.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
