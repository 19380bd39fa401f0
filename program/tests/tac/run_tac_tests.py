#!/usr/bin/env python3
"""
Test runner for the TAC core.

Discovers every test module beside this file and prints a short summary
after the verbose unittest report.
"""

import unittest
import sys
import os

# Add the project root to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

def run_tac_tests(verbosity=2):
    """Run all TAC core tests."""
    loader = unittest.TestLoader()
    test_dir = os.path.dirname(__file__)
    suite = loader.discover(test_dir, pattern='test_*.py')

    result = unittest.TextTestRunner(verbosity=verbosity).run(suite)

    print("\n" + "=" * 50)
    print("TAC TEST SUMMARY")
    print("=" * 50)
    print(f"Tests run: {result.testsRun}")
    print(f"Failures: {len(result.failures)}")
    print(f"Errors: {len(result.errors)}")
    print(f"Skipped: {len(result.skipped)}")

    for label, problems in (("FAILURES", result.failures), ("ERRORS", result.errors)):
        if problems:
            print(f"\n{label}:")
            for test, traceback in problems:
                print(f"- {test}: {traceback}")

    return result.wasSuccessful()

if __name__ == '__main__':
    success = run_tac_tests()
    sys.exit(0 if success else 1)
