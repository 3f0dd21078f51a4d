from setuptools import setup, find_packages

setup(
    name="mhsampler",
    version="0.1.0",
    author="Sanjan Muchandimath",
    description="Metropolis sampling of unnormalised densities with optional thinning",
    packages=find_packages(include=["mhsampler", "mhsampler.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.24",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "scipy>=1.10",
        ],
        "examples": [
            "matplotlib>=3.7",
        ],
    },
    entry_points={
        "console_scripts": [
            "mhsampler=mhsampler.__main__:main",
        ],
    },
)
