#!/usr/bin/env python

from setuptools import setup, find_packages

with open('skmoebius/__init__.py') as fid:
    for line in fid:
        if line.startswith('__version__'):
            VERSION = line.strip().split()[-1][1:-1]
            break

LONG_DESCRIPTION = """
	scikit-moebius provides Moebius (fractional-linear) transforms over real, complex, quaternion and octonion algebras, implemented in the Python programming language.
"""
setup(name='scikit-moebius',
	version=VERSION,
	license='new BSD',
	description='Moebius transforms over hypercomplex algebras',
	long_description=LONG_DESCRIPTION,
	packages=find_packages(include=['skmoebius', 'skmoebius.*']),
	install_requires = [
		'numpy',
		],
	extras_require = {
		'test': ['pytest'],
		},
	package_dir={'skmoebius':'skmoebius'},
	include_package_data = True,
	)
