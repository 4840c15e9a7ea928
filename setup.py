from setuptools import setup, find_packages

setup(
    name="universal-signals",
    version="0.1.0",
    description="Sport-agnostic normalization of raw match statistics into universal signals",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.22.4",
        "pandas>=1.5.3",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "universal-signals=universal_signals.main:main",
        ],
    },
)
