"""
Package setup for aicall, the AI request/response policy pipeline.
"""
from setuptools import setup, find_packages

setup(
    name="aicall",
    version="0.1.0",
    packages=find_packages(include=["aicall", "aicall.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",
        "jsonschema>=4",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
)
