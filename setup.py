from setuptools import setup, find_packages

setup(
    name="TOut",
    version="0.1.0",
    packages=find_packages(include=["tout", "tout.*"]),
    install_requires=[
        "numpy",
        "pandas",
        "matplotlib",
        "scipy",
    ],
    extras_require={
        "parallel": ["joblib"],
        "progress": ["tqdm"],
        "test": ["pytest"],
    },
    description="Optimal sample size and progression criteria for three-outcome pilot trial designs",
)
