"""
Tests for grouping and ranking word counts.
"""
import os
import sys
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.frequency_ranking import group_by_count, rank_groups


class TestGroupByCount(unittest.TestCase):

    def test_groups_words_sharing_a_count(self):
        grouped = group_by_count({"a": 2, "b": 1, "c": 2})

        self.assertEqual(set(grouped), {1, 2})
        self.assertEqual(sorted(grouped[2]), ["a", "c"])
        self.assertEqual(grouped[1], ["b"])

    def test_empty_counts(self):
        self.assertEqual(group_by_count({}), {})

    def test_every_word_lands_in_exactly_one_group(self):
        counts = {"w%d" % i: i % 4 + 1 for i in range(40)}

        grouped = group_by_count(counts)

        flattened = [word for words in grouped.values() for word in words]
        self.assertEqual(sorted(flattened), sorted(counts))
        for count, words in grouped.items():
            for word in words:
                self.assertEqual(counts[word], count)


class TestRankGroups(unittest.TestCase):

    def test_orders_counts_descending_and_words_ascending(self):
        ranked = rank_groups({1: ["b"], 3: ["z", "m", "a"], 2: ["q"]}, 0)

        self.assertEqual(
            [(g.count, g.words) for g in ranked],
            [(3, ["a", "m", "z"]), (2, ["q"]), (1, ["b"])]
        )

    def test_threshold_is_exclusive(self):
        ranked = rank_groups({1: ["a"], 2: ["b"], 3: ["c"]}, 2)

        self.assertEqual([g.count for g in ranked], [3])

    def test_nothing_above_threshold(self):
        self.assertEqual(rank_groups({1: ["x"]}, 1), [])

    def test_does_not_reorder_input_lists(self):
        groups = {2: ["b", "a"]}

        rank_groups(groups, 0)

        self.assertEqual(groups[2], ["b", "a"])


if __name__ == '__main__':
    unittest.main()
