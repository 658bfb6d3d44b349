# setup.py
from setuptools import setup, find_packages

setup(
    name="mclisp",
    version="0.1.0",
    description="A McCarthy-style metacircular LISP evaluator over immutable expression trees",
    packages=find_packages(include=["mclisp", "mclisp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=False,
)
