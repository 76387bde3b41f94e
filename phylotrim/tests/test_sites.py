#!/usr/bin/env python3

import unittest
from collections import OrderedDict

from phylotrim.tests.data_files import *
from phylotrim.process import sites
from phylotrim.process.sequence import Alignment
from phylotrim.process.error_handling import AlignmentUnequalLength


class MissingDataSitesTest(unittest.TestCase):

    def setUp(self):

        self.aln_obj = Alignment(missing_fasta)

    def test_missing_data_per_site(self):

        res = self.aln_obj.missing_data_per_site().tolist()

        self.assertEqual(res, [0., 0., 0., .5, 0., 0., 0., .25])

    def test_sites_below_threshold(self):

        res = sites.sites_below_missing(self.aln_obj.matrix, .4)

        self.assertEqual(res, [0, 1, 2, 4, 5, 6, 7])

    def test_threshold_is_inclusive(self):

        res = sites.sites_below_missing(self.aln_obj.matrix, .25)

        self.assertEqual(res, [0, 1, 2, 4, 5, 6, 7])

    def test_missing_proportion(self):

        self.assertAlmostEqual(self.aln_obj.missing_data_proportion(),
                               3. / 32)

    def test_unaligned(self):

        aln = Alignment(unaligned_fasta)

        self.assertRaises(AlignmentUnequalLength, aln.missing_data_per_site)


class InformativeSitesTest(unittest.TestCase):

    def test_informative_sites(self):

        aln = Alignment(informative_fasta)

        self.assertEqual(aln.informative_sites(), [0, 6])

    def test_informative_limit(self):

        aln = Alignment(informative_fasta)

        self.assertEqual(aln.informative_sites(limit=1), [0])

    def test_count_informative_sites(self):

        aln = Alignment(informative_fasta)

        self.assertEqual(aln.count_informative_sites(), 2)
        self.assertEqual(sites.count_informative_sites(aln.matrix), 2)

    def test_variable_sites(self):

        aln = Alignment(informative_fasta)

        self.assertEqual(aln.count_variable_sites(), 4)

    def test_ambiguous_not_counted(self):

        aln = Alignment(not_informative_fasta)

        self.assertEqual(aln.informative_sites(), [])

    def test_case_insensitive(self):

        matrix = OrderedDict([("a", "Aa"), ("b", "aA"), ("c", "Gg"),
                              ("d", "gG")])

        self.assertEqual(sites.informative_sites(matrix), [0, 1])

    def test_protein(self):

        aln = Alignment(protein_fasta, datatype="aa")

        self.assertEqual(aln.informative_sites(), [1, 2])

    def test_empty_matrix(self):

        self.assertEqual(sites.informative_sites(OrderedDict()), [])


class RebuildColumnsTest(unittest.TestCase):

    def test_rebuild(self):

        matrix = OrderedDict([("a", "ATGC"), ("b", "CGTA")])

        res = sites.rebuild_columns(matrix, [0, 3])

        self.assertEqual(res, OrderedDict([("a", "AC"), ("b", "CA")]))

    def test_preserves_order(self):

        matrix = OrderedDict([("z", "ATGC"), ("a", "CGTA")])

        res = sites.rebuild_columns(matrix, [3, 1])

        self.assertEqual(list(res.items()), [("z", "TC"), ("a", "GA")])


if __name__ == "__main__":
    unittest.main()
