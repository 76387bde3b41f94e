"""
Introduction to PhyloTrim's process module
==========================================

The `process` subpackage is the backend of the PhyloTrim CLI program. The
most important classes are :class:`~phylotrim.process.sequence.Alignment`,
defined in the :mod:`~phylotrim.process.sequence` module, and
:class:`~phylotrim.process.batch.AlignmentList`, defined in the
:mod:`~phylotrim.process.batch` module.

What it does
------------

The `process` module contains the classes and functions responsible for
parsing, validating, trimming, filtering and writing alignment data.

Submodules description
----------------------

:mod:`~phylotrim.process.base`
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Contains the input and output formats, the character alphabets and
several methods and functions that are inherited or used by
:class:`~phylotrim.process.sequence.Alignment` and
:class:`~phylotrim.process.batch.AlignmentList` objects, as well as by
the PhyloTrim CLI program.

:mod:`~phylotrim.process.data`
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Contains the :class:`~phylotrim.process.data.SummaryRecord` class, the
per-file outcome of every operation, and the functions that aggregate
them into tables.

:mod:`~phylotrim.process.error_handling`
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Contains custom made Exception sub-classes.

:mod:`~phylotrim.process.sites`
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Site level statistics (missing data and parsimony informative sites) and
the column rebuild used by the trimming operations.

:mod:`~phylotrim.process.sequence`
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Contains the :class:`~phylotrim.process.sequence.Alignment` class,
responsible for the majority of the heavy lifting when dealing with
alignment files. See the module's documentation for further details.

:mod:`~phylotrim.process.batch`
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Contains the :class:`~phylotrim.process.batch.AlignmentList` class, which
applies operations to many alignment files in parallel.
"""
