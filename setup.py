import codecs
import re

from os.path import join, dirname
from setuptools import setup, find_packages

classifiers = [
    'Development Status :: 3 - Alpha',
    'Intended Audience :: Developers',
    'License :: OSI Approved :: MIT License',
    'Operating System :: OS Independent',
    'Programming Language :: Python',
    'Programming Language :: Python :: 3',
    'Topic :: Software Development :: Libraries :: Python Modules',
    'Topic :: Text Processing :: Markup :: XML'
]

here = dirname(__file__)
with codecs.open(join(here, 'README.rst'), 'r', 'utf8') as readme_file:
    with codecs.open(join(here, 'CHANGES.rst'), 'r', 'utf8') as changes_file:
        long_description = readme_file.read() + '\n' + changes_file.read()

version = None
with codecs.open(join(here, "picoxml", "__init__.py"), 'r', 'utf8') as init_file:
    match = re.search(r'^__version__ = "([^"]+)"', init_file.read(), re.M)
    if match is not None:
        version = match.group(1)

setup(name='picoxml',
      version=version,
      license="MIT License",
      description='Permissive non-validating XML 1.0 parser and writer',
      long_description=long_description,
      classifiers=classifiers,
      packages=find_packages(exclude=["*.tests", "*.tests.*", "tests.*", "tests"]),
      python_requires='>=3.6',
      install_requires=[
          'webencodings',
      ],
      extras_require={
          "test": ["pytest", "mock"],
      },
      )
