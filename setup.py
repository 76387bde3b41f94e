from setuptools import setup

import phylotrim

VERSION = phylotrim.__version__

with open('README.rst') as f:
    readme = f.read()

setup(
    name="phylotrim",
    version=VERSION,
    packages=["phylotrim",
              "phylotrim.base",
              "phylotrim.process",
              "phylotrim.tests"],
    package_data={"phylotrim.tests": ["data/*"]},
    install_requires=[
        "pandas",
        "numpy",
        "psutil",
        "progressbar2",
    ],
    extras_require={
        "test": ["pytest"]
    },
    description=("Batch trimming, filtering and conversion of multiple "
                 "sequence alignments"),
    long_description=readme,
    author="Diogo N Silva",
    author_email="odiogosilva@gmail.com",
    license="GPL3",
    classifiers=["Development Status :: 3 - Alpha",
                 "Intended Audience :: Science/Research",
                 "License :: OSI Approved :: GNU General Public License v3 ("
                 "GPLv3)",
                 "Natural Language :: English",
                 "Operating System :: POSIX :: Linux",
                 "Operating System :: MacOS :: MacOS X",
                 "Operating System :: Microsoft :: Windows",
                 "Programming Language :: Python",
                 "Programming Language :: Python :: 3",
                 "Topic :: Scientific/Engineering :: Bio-Informatics"],
    entry_points={
        "console_scripts": [
            "PhyloTrim = phylotrim.PhyloTrim:main",
            "phylotrim = phylotrim.PhyloTrim:main"
        ]
    },
)
