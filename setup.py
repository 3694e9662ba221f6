from setuptools import setup, find_packages

setup(
    name="shop-simulator",
    version="0.1.0",
    description="Discrete event simulation of a shop with human servers and self-checkout counters",
    author="adamfilli",
    packages=find_packages(include=["shopsimulator", "shopsimulator.*"]),
    install_requires=[
        "matplotlib",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "shopsim=shopsimulator.cli:main",
        ],
    },
    include_package_data=True,
    python_requires=">=3.11",
)
