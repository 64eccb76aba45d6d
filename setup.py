#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages

with open('README.rst') as readme_file:
    readme = readme_file.read()

with open('HISTORY.rst') as history_file:
    history = history_file.read()

requirements = ['toolz>=0.8']

test_requirements = ['pytest', 'pytest-cov', 'pytest-mock',
                     'pytest-helpers-namespace']

setup(
    name='pyqc',
    version='0.1.0',
    description=('Quality control pipeline for paired-end '
                 'Illumina sequencing reads.'),
    long_description=readme + '\n\n' + history,
    author='Ryan Moore',
    url='https://github.com/mooreryan/qc',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    include_package_data=True,
    install_requires=requirements,
    python_requires='>=3.8',
    license='GPLv3',
    zip_safe=False,
    keywords='pyqc',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
    ],
    extras_require={
        'test': test_requirements
    },
    entry_points={'console_scripts': [
        'pyqc = pyqc.main.pyqc:main'
    ]})
