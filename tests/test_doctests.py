"""
Runs the examples embedded in docstrings.
"""

import unittest
import doctest
import importlib


class DocTestCase(unittest.TestCase):

    def check(self, name):
        failed, attempted = doctest.testmod(importlib.import_module(name))
        self.assertGreater(attempted, 0)
        self.assertEqual(failed, 0)

    def test_maxplus(self):
        self.check('tropical.semiring.maxplus')

    def test_minplus(self):
        self.check('tropical.semiring.minplus')

    def test_scalar(self):
        self.check('tropical.scalar')

    def test_matrix(self):
        self.check('tropical.matrix')


if __name__ == '__main__':
    unittest.main()
