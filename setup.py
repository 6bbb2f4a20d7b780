from setuptools import setup

setup(
    name="pystr",
    version="0.1.0",
    packages=["pystr", "pystr.utils"],
    url="",
    license="BSD-3-Clause",
    author="",
    author_email="",
    description="Python str indexing, slicing and method semantics built on an explicit offset/slicing engine",
    python_requires=">=3.7",
    install_requires=[
        "click",
        "ruamel.yaml",
        "more-itertools",
        "pygtrie>=2.4",
    ],
    extras_require={
        "test": ["pytest", "pytest-mock"],
    },
    entry_points={
        "console_scripts": ["pystr=pystr.cli:main"],
    },
)
