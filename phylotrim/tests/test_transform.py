#!/usr/bin/env python3

import unittest
from collections import OrderedDict

from phylotrim.tests.data_files import *
from phylotrim.process.sequence import Alignment
from phylotrim.process.data import SummaryRecord, TRIMMED, RETAINED, \
    SKIPPED, FILTERED, EMPTY, STRIPPED
from phylotrim.process.error_handling import *


class TrimMissingDataTest(unittest.TestCase):

    def test_trim(self):

        aln = Alignment(missing_fasta)

        summary = aln.trim_missing_data(.4)

        self.assertEqual((summary.before, summary.after, summary.removed),
                         (8, 7, 1))
        self.assertEqual(summary.status, TRIMMED)
        self.assertEqual(aln.nchar, 7)
        self.assertEqual(aln.matrix["s1"], "ATGCATG")
        self.assertEqual(aln.matrix["s3"], "ATGCAT-")

    def test_row_order_preserved(self):

        aln = Alignment(missing_fasta)
        aln.trim_missing_data(.4)

        self.assertEqual(aln.taxa_list, ["s1", "s2", "s3", "s4"])

    def test_none_passing_retains(self):

        aln = Alignment(all_missing_fasta)
        original = OrderedDict(aln.matrix)

        summary = aln.trim_missing_data(.4)

        self.assertEqual(summary.status, RETAINED)
        self.assertEqual((summary.before, summary.after), (4, 4))
        self.assertEqual(aln.matrix, original)

    def test_monotonicity(self):

        for t in [0, .1, .25, .5, 1]:
            aln = Alignment(missing_fasta)
            fractions = aln.missing_data_per_site()
            summary = aln.trim_missing_data(t)
            self.assertLessEqual(summary.after, summary.before)
            self.assertGreaterEqual(summary.after,
                                    len([x for x in fractions if x < t]))

    def test_unaligned(self):

        aln = Alignment(unaligned_fasta)

        self.assertRaises(AlignmentUnequalLength, aln.trim_missing_data, .5)


class TrimInformativeTest(unittest.TestCase):

    def test_trim(self):

        aln = Alignment(informative_fasta)

        summary = aln.trim_informative_sites()

        self.assertEqual(summary, SummaryRecord(informative_fasta, 8, 2, 6,
                                                TRIMMED))
        self.assertEqual(aln.matrix, OrderedDict([("s1", "AA"),
                                                  ("s2", "AA"),
                                                  ("s3", "GC"),
                                                  ("s4", "GC")]))

    def test_trim_limit(self):

        aln = Alignment(informative_fasta)

        summary = aln.trim_informative_sites(limit=1)

        self.assertEqual(summary.after, 1)
        self.assertEqual(aln.matrix["s3"], "G")

    def test_none_informative_skips(self):

        aln = Alignment(not_informative_fasta)

        summary = aln.trim_informative_sites()

        self.assertEqual(summary.status, SKIPPED)
        self.assertEqual((summary.after, summary.removed), (0, 8))
        self.assertFalse(summary.written)


class UnalignTest(unittest.TestCase):

    def test_unalign(self):

        aln = Alignment(unaligned_fasta)

        summary = aln.unalign()

        self.assertEqual(aln.matrix["ABCD"], "ATGC")
        self.assertEqual(aln.matrix["ABCE"], "ATGCATGC")
        self.assertEqual(summary.status, STRIPPED)

    def test_header_recomputed(self):

        aln = Alignment(simple_nexus)

        aln.unalign()

        self.assertEqual(aln.nchar, 8)
        self.assertFalse(aln.is_alignment)
        self.assertEqual(aln.matrix["ABCE"], "ATGCAT")


class FilterSequencesTest(unittest.TestCase):

    def test_min_length(self):

        aln = Alignment(seq_filter_fasta)

        summary = aln.filter_sequences(min_length=5)

        self.assertEqual(aln.taxa_list, ["s1", "s4"])
        self.assertEqual((summary.before, summary.after, summary.removed),
                         (4, 2, 2))
        self.assertEqual(summary.status, FILTERED)

    def test_max_length(self):

        aln = Alignment(seq_filter_fasta)

        aln.filter_sequences(max_length=4)

        self.assertEqual(aln.taxa_list, ["s2", "s3"])

    def test_max_gap(self):

        aln = Alignment(seq_filter_fasta)

        aln.filter_sequences(max_gap=.5)

        self.assertEqual(aln.taxa_list, ["s1", "s2", "s4"])
        self.assertEqual(aln.ntax, 3)

    def test_all_removed(self):

        aln = Alignment(seq_filter_fasta)

        summary = aln.filter_sequences(min_length=10)

        self.assertEqual(summary.status, EMPTY)
        self.assertEqual(aln.ntax, 0)
        self.assertFalse(summary.written)


class SummaryRecordTest(unittest.TestCase):

    def test_invariant(self):

        self.assertRaises(InternalInvariantError, SummaryRecord.build,
                          "gene.fas", 3, 4, TRIMMED)

    def test_removed(self):

        summary = SummaryRecord.build("gene.fas", 10, 4, TRIMMED)

        self.assertEqual(summary.removed, 6)
        self.assertTrue(summary.written)


if __name__ == "__main__":
    unittest.main()
