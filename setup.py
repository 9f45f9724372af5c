#!/usr/bin/env python3

from setuptools import setup, find_packages
from os import path


def readme():
    here = path.relpath(path.abspath(path.dirname(__file__)))
    with open(path.join(here, 'README.rst'), encoding='utf-8') as f:
            return f.read()


setup(
    name='ORIFIND',
    description='ORIFIND - k-mer frequency and clump finding for replication origin search',
    long_description=readme(),
    long_description_content_type='text/x-rst',
    author='Johannes Dröge',
    author_email='code@fungs.de',
    license='GNU General Public License, version 3 (GPL-3.0)',
    packages=find_packages(exclude=['tests']),
    exclude_package_data = {'': ['.gitignore']},
    scripts=['orifind-cli'],
    use_scm_version={'fallback_version': '0.1.0'},
    python_requires='>=3.8',
    install_requires=["numpy >= 1.17", "scipy >= 1.3", "docopt >= 0.6.2"],
    extras_require={"test": ["pytest >= 7"]},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Operating System :: POSIX :: Linux"
    ]
)
