#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
#  Copyright 2012 Unknown <diogo@arch>
#
#  This program is free software; you can redistribute it and/or modify
#  it under the terms of the GNU General Public License as published by
#  the Free Software Foundation; either version 2 of the License, or
#  (at your option) any later version.
#
#  This program is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU General Public License for more details.
#
#  You should have received a copy of the GNU General Public License
#  along with this program; if not, write to the Free Software
#  Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston,
#  MA 02110-1301, USA.

"""
Exceptions raised by the parsers, transformations and batch driver of
PhyloTrim.

Structural exceptions (everything inheriting from :class:`AlignmentError`)
carry the path of the offending file and, where it applies, the offending
taxon or token, so that the batch driver can report them after they
cross a process boundary. All of them can be pickled.
"""


class AlignmentError(Exception):
    """Base class for structural problems found in an alignment file.

    Parameters
    ----------
    value : str
        Human readable description of the problem.
    path : str, optional
        Path to the alignment file that triggered the error.
    taxon : str, optional
        Identifier (or raw token) that triggered the error.
    """

    def __init__(self, value, path=None, taxon=None):
        super().__init__(value)
        self.value = value
        self.path = path
        self.taxon = taxon

    def __reduce__(self):
        return self.__class__, (self.value, self.path, self.taxon)

    def __str__(self):
        if self.path:
            return "{} ({})".format(self.value, self.path)
        return str(self.value)


class InputError(AlignmentError):
    """Malformed or unsupported input (bad magic, bad header, bad row)."""
    pass


class DuplicateTaxa(AlignmentError):
    """Raised when the same identifier is introduced twice in a file."""
    pass


class HeaderMismatch(AlignmentError):
    """Declared ntax/nchar disagree with the parsed matrix."""
    pass


class InvalidSequence(AlignmentError):
    """A sequence contains characters outside the alphabet."""
    pass


class EmptyAlignment(AlignmentError):
    pass


class AlignmentUnequalLength(AlignmentError):
    """ Raised when sequences in alignment have unequal length. """
    pass


class InternalInvariantError(Exception):
    """Raised when a result violates an internal invariant.

    This is never a user error and always aborts the current batch.
    """

    def __init__(self, value):
        super().__init__(value)
        self.message = value

    def __str__(self):
        return repr(self.message)


__author__ = "Diogo N. Silva"
