# setup.py
from setuptools import setup, find_packages

setup(
    name="page-finder",
    version="0.1.0",
    description="Асинхронный краулер PageFinder: поиск страниц сайта по CSS-классу или тексту",
    packages=find_packages(exclude=["tests", "tests.*"]),  # автоматически найдёт папку page_finder
    package_data={"page_finder.report": ["templates/*.j2"]},
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "pydantic>=2.5",
        "PyYAML>=6.0",
        "click>=8.2",
        "Jinja2>=3.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "page-finder=page_finder.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
