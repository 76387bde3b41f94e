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
Per-file summary records produced by the transformations and the tables
that aggregate them.
"""

from collections import namedtuple
from os.path import basename, dirname, abspath

import pandas as pd

from phylotrim.process.error_handling import InternalInvariantError

# Columns were trimmed
TRIMMED = "trimmed"
# No column passed the threshold and the original matrix was kept
RETAINED = "retained"
# No informative site was found and no output was written
SKIPPED = "skipped"
# Sequences were filtered and at least one remains
FILTERED = "filtered"
# Every sequence was removed by the filter
EMPTY = "empty"
# Gaps and missing data were stripped
STRIPPED = "stripped"
CONVERTED = "converted"
# The file is not aligned and was skipped
UNALIGNED = "unaligned"
# The file could not be processed and was skipped
FAILED = "failed"
# File-level filter outcomes
KEPT = "kept"
REMOVED = "removed"

write_status = [TRIMMED, RETAINED, FILTERED, STRIPPED, CONVERTED, KEPT]

summary_columns = ["parent", "file", "before", "after", "removed", "status"]


class SummaryRecord(namedtuple("SummaryRecord", ["path", "before", "after",
                                                 "removed", "status"])):
    """Outcome of a transformation applied to a single file.

    The `before` and `after` counts are site counts for trimming
    operations and sequence counts for sequence filters.

    Attributes
    ----------
    path : str
        Path to the source alignment file.
    before : int
    after : int
    removed : int
        Always `before - after`.
    status : str
        One of the status constants defined in this module.
    """

    __slots__ = ()

    @classmethod
    def build(cls, path, before, after, status):
        """Creates a record, checking the count invariant.

        Raises
        ------
        InternalInvariantError
            If `after` is greater than `before`. Transformations never add
            sites or sequences, so this is always a defect.
        """

        if before < after:
            raise InternalInvariantError(
                "Summary of {} reports more items after ({}) than before "
                "({}) the transformation".format(path, after, before))

        return cls(path, before, after, before - after, status)

    @property
    def written(self):
        """Whether this outcome produces an output file."""
        return self.status in write_status


def summary_table(records):
    """Aggregates summary records into a table sorted by source path.

    Parameters
    ----------
    records : list
        List of `SummaryRecord` objects, in any order.

    Returns
    -------
    table : pandas.DataFrame
        DataFrame with the columns {parent, file, before, after, removed,
        status}, one row per record.
    """

    records = sorted(records, key=lambda x: x.path)

    rows = [[dirname(abspath(x.path)), basename(x.path), x.before, x.after,
             x.removed, x.status] for x in records]

    return pd.DataFrame(rows, columns=summary_columns)


def write_summary(records, output_file):
    """Writes the summary table of `records` as CSV into `output_file`."""

    table = summary_table(records)
    table.to_csv(output_file, index=False)

    return table


__author__ = "Diogo N. Silva"
