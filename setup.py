"""Setup function for randomoutputpy package."""
from setuptools import find_packages, setup

setup(
    name="random-output-step",
    version="1.0.0",
    python_requires=">=3.10",
    install_requires=[
        "jsonschema",
    ],
    extras_require={
        "test": ["pytest"],
    },
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    entry_points={
        "console_scripts": [
            "random-output=randomoutputpy.cli.random_output:main",
        ],
    },
)
