from setuptools import setup, find_packages

setup(
    name='sparsegraph',
    version='1.0.0',
    description='Positional directed graph container for sparse graphs',
    packages=find_packages(exclude=('tests', 'tests.*')),
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.8',
)
