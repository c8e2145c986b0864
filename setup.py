#!/usr/bin/env python

from setuptools import setup

setup(
    name='cqlmapper',
    version='0.1.0',
    description='Cassandra object mapper walkthrough',
    packages=['cqlmapper', 'cqlmapper.aio'],
    install_requires=[
        'cassandra-driver>=3.29',
        'pyasyncore; python_version >= "3.12"',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.8',
    license='MIT'
)
