"""contacttrace setup - who could have infected whom, and when."""
from setuptools import setup, find_packages

setup(
    name="contacttrace",
    version="1.0.0",
    description="contacttrace: temporal reachability over communication events",
    packages=find_packages(include=["contacttrace", "contacttrace.*"]),
    python_requires=">=3.10",
    install_requires=[
        "click>=8.2",
        "networkx>=3.0",
        "blake3>=0.3",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.0",
            "pytest-benchmark>=4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "contacttrace=contacttrace.cli.main:cli",
        ],
    },
)
