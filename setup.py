from setuptools import setup, find_packages
from codecs import open
from os import path
import json

codemeta_json = "codemeta.json"

here = path.abspath(path.dirname(__file__))

# Let's pickup as much metadata as we need from codemeta.json
with open(path.join(here, codemeta_json), mode = "r", encoding = "utf-8") as f:
    src = f.read()
    meta = json.loads(src)

# Let's make our symvar string
__version__ = meta["version"]

# Now we need to pull and format our author string.
author = ", ".join(obj["name"] for obj in meta["author"])
description = meta['description']
name = meta['name']
keywords = meta['keywords']

# Get the long description from the README file
with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

# get the dependencies and installs
with open(path.join(here, 'requirements.txt'), encoding='utf-8') as f:
    all_reqs = f.read().split('\n')

install_requires = [x.strip() for x in all_reqs if x.strip() and 'git+' not in x]

setup(
    name=name,
    version=__version__,
    description=description,
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='BSD',
    classifiers=[
      'Development Status :: 3 - Alpha',
      'Intended Audience :: Developers',
      'Programming Language :: Python :: 3',
    ],
    keywords=keywords,
    packages=find_packages(exclude=['docs', 'tests*']),
    include_package_data=True,
    author=author,
    python_requires='>=3.7',
    install_requires=install_requires,
    extras_require={'test': ['pytest']},
    entry_points={
        'console_scripts': ['quadroot=quadroot.cli:_main'],
    },
)
