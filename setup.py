# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="minischeme",
    version="0.1.0",
    description="A small tree-walking interpreter for a Scheme-like language",
    python_requires=">=3.10",
    # Subpackages (types, reader, evaluation, builtin) are namespace packages
    packages=find_namespace_packages(include=["minischeme", "minischeme.*"]),
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["minischeme=minischeme.cli:main"],
    },
    zip_safe=False,
)
