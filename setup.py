# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="tinylog",
    version="0.1.0",
    description="Named, leveled, line-oriented logging to console and file",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["tinylog", "tinylog.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
