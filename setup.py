#setup.py
import os
from setuptools import setup, find_packages

requirements = []
with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), "requirements.txt"), "r") as R:
    for line in R:
        package = line.strip()
        if package:
            requirements.append(package)

setup(
    name="FileSplitter",
    version='0.1.0',
    description="Split delimited text files into fixed-size chunks with repeated headers",
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=requirements,
    extras_require={
        'test': ['pytest>=7.0']
    },
    package_data={'FileSplitter': ['configs/*.yaml']},
    include_package_data=True,
    entry_points={
        'console_scripts': [
            'split-file=FileSplitter.cli:main'
        ]
    },
    zip_safe=False,
)
