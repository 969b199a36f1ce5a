import os
from setuptools import setup, find_packages

here = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(here, 'requirements.txt')) as f:
    required = [line.strip() for line in f.read().splitlines()
                if line.strip() and not line.startswith('#')]

setup(
    name = 'microconfig',
    version = '0.1.0',
    description = 'Schema validation and path-based access for nested configuration trees',
    packages = find_packages(exclude=['test', 'test.*']),
    python_requires = '>=3.10',
    install_requires = required,
    extras_require = {
        'test': ['pytest>=7.0', 'pytest-cov'],
    },
)
