# setup.py
from setuptools import setup, find_packages

setup(
    name="docs_to_markdown",
    version="0.1.0",
    description="Polite same-domain crawler that archives documentation sites as Markdown",
    packages=find_packages(include=["docs_to_markdown", "docs_to_markdown.*"]),
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "click>=8.1",
        "markdownify>=0.11",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "docs-to-markdown=docs_to_markdown.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
