from setuptools import setup, find_packages

setup(
    name="c4engine",
    version="0.1.0",
    packages=find_packages(include=["c4engine", "c4engine.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "gymnasium",  # Gymnasium wrapper around the engine
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "c4engine=c4engine.interfaces.cli:main",
        ],
    },
)
