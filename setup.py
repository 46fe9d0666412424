# -*- coding: utf-8 -*-
"""
    Setup file for statmonoids.
"""

import os.path

from setuptools import find_packages, setup

_HERE = os.path.abspath(os.path.dirname(__file__))


def read_long_description() -> str:
    readme = os.path.join(_HERE, "README.md")
    if not os.path.exists(readme):
        return ""
    with open(readme, encoding="utf-8") as f:
        return f.read()


if __name__ == "__main__":
    setup(
        name="statmonoids",
        version="0.1.0",
        description="Composable, constant-space streaming statistics accumulators",
        long_description=read_long_description(),
        long_description_content_type="text/markdown",
        license="Apache-2.0",
        package_dir={"": "src"},
        packages=find_packages(where="src"),
        python_requires=">=3.8",
        install_requires=[
            "numpy>=1.17",
            "typing_extensions>=3.10",
        ],
        extras_require={
            "pandas": ["pandas>=1.0"],
            "test": ["pytest>=6.2", "pandas>=1.0"],
        },
        classifiers=[
            "Programming Language :: Python :: 3",
            "Topic :: Scientific/Engineering :: Mathematics",
        ],
    )
