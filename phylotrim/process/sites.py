"""Site level statistics for aligned sequence matrices.

All functions in this module receive a sequence matrix, that is, an
ordered mapping of taxon name to sequence string, and operate on the
columns of that matrix. They assume the matrix is aligned (every sequence
has the same length). Callers are responsible for checking alignment
before calling them (see :class:`phylotrim.process.sequence.SeqCheck`).

The columns are evaluated with numpy over a two dimensional character
array, with one row per taxon and one column per site. Every function that
returns sites returns their zero-based indices in ascending order.
"""

from collections import OrderedDict
from itertools import compress

import numpy as np

from phylotrim.process.base import dna_chars, aa_ambiguous


def char_matrix(matrix):
    """Converts a sequence matrix into a 2D numpy character array.

    Parameters
    ----------
    matrix : OrderedDict
        Maps taxon names to sequence strings of equal length.

    Returns
    -------
    arr : numpy.ndarray
        Array of shape (ntax, nchar) with dtype `U1`.
    """

    if not matrix:
        return np.empty((0, 0), dtype="U1")

    return np.array([list(seq) for seq in matrix.values()], dtype="U1")


def _missing_mask(arr, missing="?", gap="-"):
    return (arr == missing) | (arr == gap)


def missing_data_per_site(matrix, missing="?", gap="-"):
    """Returns the fraction of missing data of each site.

    A character is considered missing when it is either the `missing` or
    the `gap` symbol.

    Parameters
    ----------
    matrix : OrderedDict
        Aligned sequence matrix.
    missing : str
        Missing data symbol.
    gap : str
        Gap symbol.

    Returns
    -------
    fractions : numpy.ndarray
        Float array with one entry per site, with the number of missing
        characters in that site divided by the number of taxa.
    """

    arr = char_matrix(matrix)

    if not arr.size:
        return np.zeros(arr.shape[1])

    return _missing_mask(arr, missing, gap).sum(axis=0) / float(len(arr))


def sites_below_missing(matrix, threshold, missing="?", gap="-"):
    """Returns the sites whose missing data fraction is <= `threshold`.

    Parameters
    ----------
    matrix : OrderedDict
        Aligned sequence matrix.
    threshold : float
        Maximum fraction of missing data allowed in a site, between 0
        and 1.
    missing : str
        Missing data symbol.
    gap : str
        Gap symbol.

    Returns
    -------
    sites : list
        Ascending list of site indices that pass the threshold.
    """

    fractions = missing_data_per_site(matrix, missing, gap)

    return np.flatnonzero(fractions <= threshold).tolist()


def _state_counts(arr, datatype="dna", missing="?", gap="-"):
    """Counts each character state in each site.

    Returns an array of shape (nstates, nchar), where each row holds the
    per-site frequency of one character state. Which states are counted
    depends on `datatype`: for DNA only the unambiguous nucleotides, for
    amino acids every residue except the ambiguous ones, and for other
    data every symbol except `missing` and `gap`.
    """

    arr = np.char.lower(arr)

    if datatype == "dna":
        states = dna_chars
    elif datatype == "aa":
        states = [x for x in np.unique(arr) if x not in aa_ambiguous]
    else:
        states = [x for x in np.unique(arr)
                  if x not in (missing.lower(), gap.lower())]

    if not states:
        return np.zeros((0, arr.shape[1]), dtype=int)

    return np.array([(arr == st).sum(axis=0) for st in states])


def informative_sites(matrix, datatype="dna", limit=None, missing="?",
                      gap="-"):
    """Returns the parsimony informative sites of an aligned matrix.

    A site is parsimony informative when at least two distinct character
    states each occur in at least two sequences. Character states are
    compared case-insensitively and missing data is never counted as a
    state.

    Parameters
    ----------
    matrix : OrderedDict
        Aligned sequence matrix.
    datatype : str
        One of {"dna", "aa", "ignore"}. Selects the character states that
        are counted.
    limit : int, optional
        If provided, only the first `limit` informative sites are returned.
    missing : str
        Missing data symbol. Only used when `datatype` is "ignore".
    gap : str
        Gap symbol. Only used when `datatype` is "ignore".

    Returns
    -------
    sites : list
        Ascending list of informative site indices.
    """

    arr = char_matrix(matrix)

    if not arr.size:
        return []

    counts = _state_counts(arr, datatype, missing, gap)
    informative = (counts >= 2).sum(axis=0) >= 2
    sites = np.flatnonzero(informative).tolist()

    if limit is not None:
        sites = sites[:limit]

    return sites


def count_informative_sites(matrix, datatype="dna", missing="?", gap="-"):
    return len(informative_sites(matrix, datatype, missing=missing,
                                 gap=gap))


def count_variable_sites(matrix, datatype="dna", missing="?", gap="-"):
    """Returns the number of sites with more than one character state."""

    arr = char_matrix(matrix)

    if not arr.size:
        return 0

    counts = _state_counts(arr, datatype, missing, gap)

    return int(((counts >= 1).sum(axis=0) >= 2).sum())


def missing_data_proportion(matrix, missing="?", gap="-"):
    """Returns the proportion of missing characters in the whole matrix."""

    arr = char_matrix(matrix)

    if not arr.size:
        return 0.

    return float(_missing_mask(arr, missing, gap).sum()) / arr.size


def rebuild_columns(matrix, sites):
    """Builds a new matrix that keeps only the provided sites.

    For every row, the characters at `sites` are selected in their
    original relative order. Row order is preserved.

    Parameters
    ----------
    matrix : OrderedDict
        Aligned sequence matrix.
    sites : iterable
        Indices of the sites to keep.

    Returns
    -------
    new_matrix : OrderedDict
    """

    if not matrix:
        return OrderedDict()

    nchar = max(len(x) for x in matrix.values())
    keep = set(sites)
    # Binary list used to compress each sequence
    filtered_cols = [1 if i in keep else 0 for i in range(nchar)]

    return OrderedDict(
        (taxon, "".join(compress(seq, filtered_cols)))
        for taxon, seq in matrix.items())


__author__ = "Diogo N. Silva"
