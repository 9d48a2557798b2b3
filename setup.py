# setup.py
from setuptools import setup, find_packages

setup(
    name="owl",
    version="0.1.0",
    description="A small Lisp-family reader and evaluator",
    packages=find_packages(include=("owl", "owl.*")),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
