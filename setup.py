"""Setup configuration for tickerchange package."""

from setuptools import find_namespace_packages, setup

with open("README.md", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="tickerchange",
    version="1.0.0",
    description="Current price and daily/weekly/monthly/yearly changes for stock tickers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Daniel",
    packages=find_namespace_packages(include=["src*", "config*", "scripts*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.24.0",
        "aiohttp>=3.9.0",
        "pydantic>=2.7.0",
        "pydantic-settings>=2.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "pytest-asyncio>=0.21.0",
            "ruff>=0.1.0",
            "mypy>=1.5.0",
            "pre-commit>=3.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "ticker-change=scripts.ticker_change:main",
        ],
    },
)
