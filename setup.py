from setuptools import setup, find_packages

setup(
    name="athlete_sync",
    version="1.0.0",
    packages=find_packages(include=["athlete_sync", "athlete_sync.*"]),
    python_requires=">=3.10",
    install_requires=[
        "httpx>=0.25.0",
        "beautifulsoup4>=4.12.0",
        "lxml>=4.9.0",
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
        "playwright>=1.40.0",
        "fastapi>=0.100.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "athlete-sync=athlete_sync.cli:main",
        ],
    },
    author="Aaron",
    description="Athlete profile scraper: verified PRs, grad year and team metadata from athletic.net",
)
