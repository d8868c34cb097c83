from setuptools import setup, find_packages

setup(
    name="colorparse",
    version="0.1.0",
    description="Parse Git-style color configuration strings into terminal styles",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.11",
)
