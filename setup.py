#!/usr/bin/env python
from setuptools import setup, find_packages


setup(
    name='ircstrings',
    description='String helpers for IRC formatting, validation, and matching',
    version='1.0.0',
    license='X11',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Communications :: Chat :: Internet Relay Chat',
        'Topic :: Software Development :: Libraries :: Python Modules'],
    packages=find_packages(),
    extras_require={
        'test': [
            'Twisted',
            'tox']},
    zip_safe=False)
