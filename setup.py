"""Setup script for the Design Patterns Playground API."""

from setuptools import setup, find_packages

setup(
    name="patterns_playground",
    version="1.0.0",
    description="Design patterns demonstrated on an order management and payment domain, served over HTTP",
    author="ML Roadmap Bootcamp",
    python_requires=">=3.9",
    packages=find_packages(include=["patterns_playground", "patterns_playground.*"]),
    install_requires=[
        line.strip()
        for line in open("requirements.txt")
        if line.strip() and not line.startswith("#") and not line.startswith("git+")
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.23.0",
            "httpx>=0.27.0",
            "black>=23.0.0",
            "isort>=5.12.0",
            "flake8>=6.0.0",
            "mypy>=1.4.0",
            "pytest-cov>=4.1.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "patterns-playground=patterns_playground.api.main:main",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Financial and Insurance Industry",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
