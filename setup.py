from setuptools import setup, find_packages

setup(
    name="lyricscrape",
    version="0.1.0",
    description="Fetch song lyrics from configurable lyric websites with a generic, selector-driven two-stage scraper",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"lyricscrape": ["py.typed", "defaults.json"]},
    install_requires=[
        "beautifulsoup4",
        "requests",
        "soupsieve",
        "typer",
    ],
    extras_require={
        "dev": [
            "pytest",
            "black",
            "ruff",
            "mypy",
        ]
    },
    entry_points={
        "console_scripts": [
            "lyricscrape=lyricscrape.cli:main",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
        "Topic :: Multimedia :: Sound/Audio",
    ],
    keywords="lyrics scraper selectors css genius azlyrics",
)
