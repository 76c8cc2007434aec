import unittest

import scanless
import scanless.keywords
import scanless.parser


class PackageExportsTest(unittest.TestCase):
    def test_all_names_are_exported(self) -> None:
        for name in scanless.__all__:
            self.assertTrue(hasattr(scanless, name), name)

    def test_star_import_matches_submodules(self) -> None:
        self.assertEqual(
            sorted(scanless.__all__),
            sorted(scanless.keywords.__all__ + scanless.parser.__all__),
        )
