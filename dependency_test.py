#!/usr/bin/env python3
from sys import version_info
if version_info < (3, 6, 0):
    raise RuntimeError("Not intended to run on the Python less than '3.6.0' Got version: '%s.%s.%s'" % version_info[:3])

for module, package in (('pytest', 'pytest'), ('pytest_cov', 'pytest-cov')):
    try:
        __import__(module)
    except ImportError:
        raise ImportError("You should install '%s' package to run tests in Python %s.%s.%s"
                          % ((package, ) + tuple(version_info[:3])))
