from setuptools import setup, find_packages

setup(
    name="tailbounds",
    version="0.1.0",
    description="Markov, Chebyshev, Chernoff and Talagrand tail bounds against simulated coin flips",
    author="Joseph Margaryan",
    author_email="josephmargaryan@gmail.com",
    packages=find_packages(include=["tailbounds", "tailbounds.*"]),
    install_requires=[
        "numpy",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",
)
