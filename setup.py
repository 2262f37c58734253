"""Setup script for petstore-oop."""

from setuptools import setup, find_packages

setup(
    name="petstore-oop",
    version="0.1.0",
    description="Introductory Object-Oriented Programming tutorial built around a pet store",
    packages=find_packages(include=["petstore_oop", "petstore_oop.*"]),
    install_requires=[
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "python-dotenv>=1.0.0",
        "pyyaml>=6.0.0",
        "typer>=0.12.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "petstore-oop=petstore_oop.cli:app",
        ],
    },
    python_requires=">=3.10",
)
