# setup.py
from setuptools import setup, find_packages

setup(
    name="eta",
    version="0.1.0",
    description="A small lexically-scoped Lisp evaluator",
    packages=find_packages(include=["eta", "eta.*"]),
    python_requires=">=3.10",
    extras_require={"test": ["pytest", "hypothesis"]},
    entry_points={"console_scripts": ["eta=eta.__main__:main"]},
    zip_safe=False,
)
