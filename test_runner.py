import unittest

import phylotrim.tests.test_readers as readers
import phylotrim.tests.test_sites as sites
import phylotrim.tests.test_transform as transform
import phylotrim.tests.test_process_write as process_write
import phylotrim.tests.test_batch as batch
import phylotrim.tests.test_phylotrim as phylotrim_cli

loader = unittest.TestLoader()
suite = unittest.TestSuite()

# Add test suites
suite.addTests(loader.loadTestsFromModule(readers))
suite.addTests(loader.loadTestsFromModule(sites))
suite.addTests(loader.loadTestsFromModule(transform))
suite.addTests(loader.loadTestsFromModule(process_write))
suite.addTests(loader.loadTestsFromModule(batch))
suite.addTests(loader.loadTestsFromModule(phylotrim_cli))

runner = unittest.TextTestRunner(verbosity=3)
result = runner.run(suite)
