from setuptools import setup, find_packages

setup(
    name="tensorprimer",
    version="0.1.0",
    description="Interactive console demos of array and tensor arithmetic",
    package_dir={"": "src"},
    packages=find_packages(
        where="src",
        exclude=("tests",)
    ),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "pandas",
        "matplotlib",
        "pyyaml",
    ],
    extras_require={
        "test": ["pytest"],
        "docs": ["sphinx", "myst-parser", "furo"],
    },
    entry_points={
        "console_scripts": ["tensorprimer=tensorprimer.cli:main"],
    },
)
