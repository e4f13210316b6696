from setuptools import setup, find_packages

setup(
    name="ts-process-simulation",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy",
        "pandas",
        "scipy",
        "statsmodels",
        "arch",
        "matplotlib",
        "seaborn",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",
)
