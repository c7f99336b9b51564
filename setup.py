from setuptools import setup, find_packages

# Use find_packages to automatically discover all packages
packages = find_packages(include=["distributor", "distributor.*"])

setup(
    name="distributor",
    version="0.1.0",
    description="Deterministic transforms from uniform inputs to standard normal variates",
    packages=packages,
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest",
            "scipy",
        ],
    },
)
