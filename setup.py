# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="treescaffold",
    version="0.1.0",
    description="Create directory layouts from tree diagrams and print layouts as tree diagrams",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["treescaffold", "treescaffold.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'treescaffold=treescaffold.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
