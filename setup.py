#
# Copyright (c) 2015 EMC Corporation
# All Rights Reserved
#
# This software contains the intellectual property of EMC Corporation
# or is licensed to EMC Corporation from third parties.  Use of this
# software and the intellectual property contained therein is expressly
# limited to the terms and conditions of the License Agreement under which
# it is provided by or on behalf of EMC.
#

""" Python setuptools setup for coprhdlib distribution """

import ast
import os.path
import re
import textwrap
from setuptools import setup

distribution_name = "coprhdlib"
main_module_name = 'coprhdlib'

# read metadata without importing the package, its requirements may not be
# installed yet
here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, main_module_name, '__init__.py')) as init_file:
    main_module_src = init_file.read()


def _metadata(name):
    return re.search(r"^__%s__ = '([^']*)'" % name,
                     main_module_src, re.M).group(1)


main_module_doc = ast.get_docstring(ast.parse(main_module_src))
short_description, long_description = (
    textwrap.dedent(desc).strip()
    for desc in main_module_doc.split('\n\n', 1)
    )

setup(
    name=distribution_name,
    version=_metadata('version'),
    description=short_description,
    license=_metadata('license'),
    author=_metadata('author'),
    author_email=_metadata('author_email'),
    long_description=long_description,
    packages=['coprhdlib'],
    include_package_data=True,
    python_requires='>=3.8',
    classifiers=[
        # Reference: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 4 - Beta",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Operating System :: OS Independent",
        "Intended Audience :: Developers",],
    install_requires=[
        'oslo.config>=3.7.0',
        'requests>=2.8.1,!=2.9.0',
        'urllib3>=1.8.3',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'oslo.config.opts': [
            'coprhdlib = coprhdlib.config:list_opts',
        ],
    },
)
