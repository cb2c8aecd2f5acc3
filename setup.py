# setup.py
from setuptools import setup, find_packages

setup(
    name="wave_based_method",
    version="1.0.0",
    description="Formula engine for the coupled room/plate Wave-Based Method acoustic model",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.21.0",
        "scipy>=1.7.0",
        "tqdm"
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",
)
