# setup.py
from setuptools import setup, find_packages

setup(
    name="sexp-stepper",
    version="0.1.0",
    description="Small-step reducer for a minimal s-expression language",
    packages=find_packages(include=["sexp_stepper", "sexp_stepper.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["sexp-stepper=sexp_stepper.__main__:main"],
    },
    zip_safe=False,
)
