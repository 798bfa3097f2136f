import unittest

from densegraph import DenseGraph, LabelRef, OutOfRangeError, StaleLabelRefError

class LabelRefTest(unittest.TestCase):
    def test_get_and_set(self):
        g = DenseGraph(labels=["a", "b"])
        ref = g.label_ref(1)
        self.assertIsInstance(ref, LabelRef)
        self.assertEqual(ref.vertex, 1)
        self.assertEqual(ref.get(), "b")
        ref.set("B")
        self.assertEqual(g.label_at(1), "B")
        g.set_label(1, "bb")
        self.assertEqual(ref.get(), "bb")

    def test_out_of_range(self):
        g = DenseGraph(labels=["a"])
        with self.assertRaises(OutOfRangeError):
            g.label_ref(1)

    def test_survives_insertion_without_growth(self):
        g = DenseGraph(4, labels=["a"])
        ref = g.label_ref(0)
        g.add_vertex("b")
        self.assertFalse(ref.is_stale())
        self.assertEqual(ref.get(), "a")

    def test_stale_after_growth(self):
        g = DenseGraph(1, labels=["a"])
        ref = g.label_ref(0)
        g.add_vertex("b")
        self.assertTrue(ref.is_stale())
        with self.assertRaises(StaleLabelRefError):
            ref.get()
        with self.assertRaises(StaleLabelRefError):
            ref.set("z")
        self.assertEqual(g.label_at(0), "a")
        self.assertIn("stale=True", repr(ref))

    def test_stale_after_assign(self):
        g = DenseGraph(labels=["a"])
        ref = g.label_ref(0)
        g.assign(DenseGraph(labels=["x"]))
        with self.assertRaises(RuntimeError):
            ref.get()

if __name__ == "__main__":
    unittest.main()
