#!/usr/bin/env python

import re

from setuptools import setup, find_packages

with open("cachecontrolheader/__init__.py") as init_fd:
    version = re.search(r'^__version__ = "([^"]+)"', init_fd.read(), re.M).group(1)

setup(name='cachecontrolheader',
      version=version,
      description='Parse and serialise the HTTP Cache-Control header.',
      long_description=open("README.md").read(),
      long_description_content_type="text/markdown",
      license = "MIT",
      packages=find_packages(exclude=["test", "test.*"]),
      package_dir={'cachecontrolheader': 'cachecontrolheader'},
      python_requires=">=3.7",
      install_requires=[
          'markdown >= 2.6.5',
          'markupsafe >= 2.0',
          'typing_extensions >= 3.7',
      ],
      extras_require={
          'dev': [
          'mypy',
          ]
      },
      classifiers=[
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Internet :: WWW/HTTP',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: MIT License',
      ],
)
