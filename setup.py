import os

from setuptools import find_packages, setup

setup(
    name="norwegian-input-validator",
    version="1.0.0",
    packages=find_packages(include=["norwegian_validator", "norwegian_validator.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    description="Immutable, chainable validation of form values with Norwegian error messages",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
