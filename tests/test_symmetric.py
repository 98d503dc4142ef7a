import unittest

from dsforest.symmetric import SymmetricTable


class SymmetricTableTestCase(unittest.TestCase):
    def test_put_get(self):
        table = SymmetricTable()
        table.put('a', 'b', 1)
        self.assertEqual(1, table.get('a', 'b'))
        self.assertEqual(1, table.get('b', 'a'))
        self.assertIsNone(table.get('a', 'c'))
        self.assertEqual(0, table.get('a', 'c', 0))

    def test_contains(self):
        table = SymmetricTable()
        table.put(1, 2, 'x')
        self.assertTrue(table.contains(1, 2))
        self.assertTrue(table.contains(2, 1))
        self.assertIn((2, 1), table)
        self.assertNotIn((1, 3), table)

    def test_overwrite(self):
        table = SymmetricTable()
        table.put('a', 'b', 1)
        table.put('b', 'a', 2)
        self.assertEqual(2, table.get('a', 'b'))
        table.put('a', 'b', 3)
        self.assertEqual(3, table.get('b', 'a'))
        self.assertEqual(1, len(table))
        self.assertEqual([('b', 'a', 3)], table.cells())

    def test_same_keys(self):
        table = SymmetricTable()
        table.put('a', 'a', 1)
        table.put('a', 'a', 2)
        self.assertEqual([('a', 'a', 2)], table.cells())


if __name__ == '__main__':
    unittest.main()
