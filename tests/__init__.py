import glob
import importlib
import os
import unittest

from unittest import TestCase

suites = []
add = suites.append


def unit(run=[]):
    """Import every test module, then run the registered test cases.

    Returns the number of tests run and the number which failed.
    """

    for path in sorted(glob.glob(os.path.join(os.path.dirname(__file__),
                                              "test_*.py"))):
        name = os.path.splitext(os.path.basename(path))[0]
        importlib.import_module("tests." + name)

    loader = unittest.defaultTestLoader
    suite = unittest.TestSuite()
    for case in suites:
        if not run or case.__name__ in run:
            suite.addTests(loader.loadTestsFromTestCase(case))

    result = unittest.TextTestRunner(verbosity=1).run(suite)
    return result.testsRun, len(result.failures) + len(result.errors)
