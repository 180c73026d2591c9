#!/usr/bin/env python3
# Always prefer setuptools over distutils
from setuptools import setup, find_packages
# To use a consistent encoding
from codecs import open
import os
import re

here = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()


def find_version(fname):
    with open(os.path.join(here, fname), 'rt') as fd:
        contents = fd.read()
        match = re.search(r"^PNG_STASH_VERSION = ['\"]([^'\"]*)['\"]",
                          contents, re.M)
        if match:
            return match.group(1)
        raise RuntimeError('Unable to find version string')


setup(
    name='pngstash',
    version=find_version('pngstash/__main__.py'),
    description='Hide messages in the chunks of PNG files',
    long_description=long_description,
    long_description_content_type='text/markdown',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3',
    ],
    packages=find_packages(exclude=['tests']),
    keywords='steganography png',
    python_requires='>=3.7',
    entry_points={
        'console_scripts': [
            'pngstash = pngstash.__main__:main',
        ]
    },
    install_requires=[
        'cryptography>=3.1',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
