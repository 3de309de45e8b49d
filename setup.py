#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""

from setuptools import setup, find_packages

with open('README.rst') as readme_file:
    readme = readme_file.read()

requirements = []

extras_requirements = {
    'color': [
        'pygments',
        'colorful',
    ],
}

test_requirements = [
    'pytest',
    'pygments',
    'colorful',
]

extras_requirements['test'] = test_requirements

setup(
    name='ktprint',
    version='0.1.0',
    description="Pretty printer for decompiled Kotlin classes",
    long_description=readme,
    author="Tommi Kaikkonen",
    author_email='kaikkonentommi@gmail.com',
    url='https://github.com/tommikaikkonen/ktprint',
    packages=find_packages(include=['ktprint', 'ktprint.*']),
    include_package_data=True,
    install_requires=requirements,
    extras_require=extras_requirements,
    license="MIT license",
    zip_safe=False,
    keywords='ktprint',
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3.6',
    ],
    test_suite='tests',
    tests_require=test_requirements,
)
