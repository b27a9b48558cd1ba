# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="assetdata",
    version="1.0.0",
    description="Expose asset folder contents as a navigable tree for template logic",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["assetdata*"]),
    python_requires=">=3.9",
    install_requires=[
        "PyYAML>=6.0",
    ],
    extras_require={
        "tests": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'assetdata=assetdata.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
