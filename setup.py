from setuptools import setup, find_packages

setup(
    name="abalone_engine",
    version="0.1.0",
    packages=find_packages(),
    install_requires=[
        "numpy>=1.24.3",
        "click>=8.0.0",
    ],
    extras_require={
        'test': [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'abalone-moves=abalone_engine.cli.main:cli',
        ],
    },
    python_requires=">=3.9",
)
