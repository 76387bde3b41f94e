"""
Welcome to the PhyloTrim API reference guide. This reference guide details
the sub-packages and modules of PhyloTrim.

What is PhyloTrim
=================

PhyloTrim is a command line application and library that reads multiple
sequence alignments in nexus, phylip and fasta formats, validates them and
applies alignment-wide transformations to batches of hundreds of files:

    - Trimming sites by missing data.
    - Trimming sites by parsimony informativeness.
    - Removing gaps and missing data (un-aligning).
    - Filtering sequences by length or amount of gaps.
    - Selecting whole alignments by number of taxa, length, informative
      sites, missing data or taxa content.
    - Converting between formats.

Every operation produces a summary record for each file that is collected
into a CSV table.

How can PhyloTrim be used
=========================

PhyloTrim can be used as a:

    - Command line application (PhyloTrim).
    - Library of classes to parse, modify and export alignment data.

Components of PhyloTrim
=======================

Process backend
---------------

The main functionality of PhyloTrim is provided by the modules in the
:mod:`phylotrim.process` sub package. Single alignment files are handled
by :class:`~phylotrim.process.sequence.Alignment`, in the
:mod:`phylotrim.process.sequence` module, while batches of files are
processed in parallel by :class:`~phylotrim.process.batch.AlignmentList`,
in the :mod:`phylotrim.process.batch` module.

Command line interface
----------------------

The CLI program is defined in :mod:`phylotrim.PhyloTrim`, and the sanity
checks of its arguments in :mod:`phylotrim.base.sanity`.
"""

__version__ = "0.1.0"
__build__ = "191026"
__author__ = "Diogo N. Silva"
__copyright__ = "Diogo N. Silva"
__credits__ = ["Diogo N. Silva"]
__license__ = "GPL3"
__maintainer__ = "Diogo N. Silva"
__email__ = "o.diogosilva@gmail.com"
__status__ = "3 - Alpha"
