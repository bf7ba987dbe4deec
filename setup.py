"""Package setup for zte_sms."""

from setuptools import setup, find_packages

setup(
    name="zte-sms",
    version="1.0.0",
    description="Log in to a ZTE router web interface and watch its SMS inbox",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
    ],
    extras_require={
        "ui": [
            "colorlog>=6.8.0",
        ],
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "zte-sms=zte_sms.cli:main",
        ],
    },
)
