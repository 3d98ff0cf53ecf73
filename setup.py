"""
USJ Checks package setup.
"""

from setuptools import setup, find_packages

# Test modules stay out of the installed package
PACKAGE_EXCLUDES = ["usj_checks.tests", "usj_checks.tests.*"]

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="usj-checks",
    version="0.1.0",
    description="Translation quality checks for USJ scripture documents",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=PACKAGE_EXCLUDES),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Text Processing :: Linguistic",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
        ],
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "usj-checks=usj_checks.cli:main",
        ],
    },
)
