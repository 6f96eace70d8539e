# setup.py
from setuptools import setup, find_packages

setup(
    name="shape-schema",              # the *distribution* name on PyPI
    version="0.1.0",
    packages=find_packages(exclude=("tests", "tests.*")),  # will find shape_schema/
    python_requires=">=3.9",
    install_requires=["pandas", "numpy"],  # DataFrame checks, numpy scalar categories
    include_package_data=True,        # so we can bundle the JSON definitions
    package_data={
        "shape_schema": ["schemas/*.json"],
    },
    description="Composable runtime schema nodes with a shared validation result",
    author="Your Name",
    license="Creative Commons Attribution-NonCommercial-ShareAlike 4.0 International License",
)
