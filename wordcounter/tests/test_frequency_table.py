import threading
import unittest

from wordcounter.frequency_table import ConcurrentFrequencyTable, FrequencyTable


class TestFrequencyTable(unittest.TestCase):

    def test_case_insensitive_grouping(self):
        for table in (FrequencyTable(), ConcurrentFrequencyTable()):
            for word in "Test test TEST".split():
                table.increment(word)
            self.assertEqual(len(table), 1)
            self.assertEqual(table["test"], 3)
            self.assertEqual(table.to_dict(), {"Test": 3})

    def test_first_casing_wins(self):
        table = FrequencyTable()
        table.increment("word")
        table.increment("WORD")
        self.assertEqual(list(table), ["word"])
        self.assertEqual(table["Word"], 2)

    def test_from_mapping(self):
        table = FrequencyTable({"The": 2, "brown": 1})
        table.increment("the")
        self.assertEqual(table, {"The": 3, "brown": 1})
        self.assertIn("BROWN", table)
        self.assertNotIn("fox", table)
        self.assertIsNone(table.get("fox"))

    def test_equality_between_variants(self):
        table = FrequencyTable({"a": 1, "B": 2})
        concurrent = ConcurrentFrequencyTable({"A": 1, "b": 2})
        self.assertEqual(table, concurrent)
        self.assertNotEqual(table, {"a": 1})

    def test_concurrent_increments(self):
        table = ConcurrentFrequencyTable(lock_stripes=4)
        words = ["alpha", "Beta", "gamma", "ALPHA"] * 500

        def worker():
            for word in words:
                table.increment(word)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(table, {"alpha": 8000, "beta": 4000, "gamma": 4000})


if __name__ == "__main__":
    unittest.main()
