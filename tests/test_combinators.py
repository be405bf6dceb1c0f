import unittest
from dataclasses import dataclass

from validationpy import (
    Success, Failure, pure, curry,
    map_n, map2, map3, map4, map5, map6, map7,
    with_validation, and_then, sequence, traverse, dict_union,
)


def _check_positive(x):
    return Success(x) if x > 0 else Failure([f"{x} not positive"])


class TestMapN(unittest.TestCase):
    def test_all_success_applies_function(self):
        vs = [Success(i) for i in range(1, 8)]
        self.assertEqual(map2(lambda a, b: a + b, *vs[:2]), Success(3))
        self.assertEqual(map3(lambda a, b, c: a + b + c, *vs[:3]), Success(6))
        self.assertEqual(map4(lambda *xs: sum(xs), *vs[:4]), Success(10))
        self.assertEqual(map5(lambda a, b, c, d, e: [a, b, c, d, e], *vs[:5]), Success([1, 2, 3, 4, 5]))
        self.assertEqual(map6(lambda a, b, c, d, e, f: a * f, *vs[:6]), Success(6))
        self.assertEqual(map7(lambda a, b, c, d, e, f, g: (a, g), *vs), Success((1, 7)))

    def test_errors_concatenate_in_argument_order(self):
        r = map5(
            lambda a, b, c, d, e: None,
            Failure(["a"]), Success(2), Failure(["c1", "c2"]), Success(4), Failure(["e"]),
        )
        self.assertEqual(r, Failure(["a", "c1", "c2", "e"]))

    def test_single_failure_propagates(self):
        r = map3(lambda a, b, c: a, Success(1), Failure(["only"]), Success(3))
        self.assertEqual(r, Failure(["only"]))

    def test_map_n_beyond_seven(self):
        vs = [Success(i) for i in range(10)]
        self.assertEqual(map_n(lambda *xs: sum(xs), *vs), Success(45))
        bad = vs[:]
        bad[0] = Failure(["x0"]); bad[9] = Failure(["x9"])
        self.assertEqual(map_n(lambda *xs: sum(xs), *bad), Failure(["x0", "x9"]))

    def test_map_n_single_and_empty(self):
        self.assertEqual(map_n(lambda a: a + 1, Success(1)), Success(2))
        with self.assertRaises(TypeError):
            map_n(lambda: 1)

    def test_map_n_custom_merge(self):
        r = map_n(lambda a, b: 0, Failure({"a": "x"}), Failure({"b": "y"}), merge=dict_union)
        self.assertEqual(r, Failure({"a": "x", "b": "y"}))


@dataclass(frozen=True)
class Point:
    x: int
    y: int
    z: int


class TestWithValidation(unittest.TestCase):
    def test_builds_record(self):
        v = pure(curry(Point))
        v = with_validation(Success(1), v)
        v = with_validation(Success(2), v)
        v = with_validation(Success(3), v)
        self.assertEqual(v, Success(Point(1, 2, 3)))

    def test_collects_field_errors(self):
        v = pure(curry(Point))
        v = with_validation(Failure(["x"]), v)
        v = with_validation(Success(2), v)
        v = with_validation(Failure(["z"]), v)
        self.assertEqual(v, Failure(["x", "z"]))

    def test_fluent_apply(self):
        v = pure(curry(Point)).apply(Success(1)).apply(Failure(["y"])).apply(Failure(["z"]))
        self.assertEqual(v, Failure(["y", "z"]))


class TestAndThen(unittest.TestCase):
    def test_success_chains(self):
        r = and_then(lambda x: Success(x * 2), Success(3))
        self.assertEqual(r, Success(6))

    def test_failure_never_calls_function(self):
        called = []
        r = and_then(lambda x: called.append(x) or Success(x), Failure("e"))
        self.assertEqual(r, Failure("e"))
        self.assertEqual(called, [])

    def test_dependent_parse(self):
        def not_blank(s):
            return Success(s) if s.strip() else Failure("blank")

        def to_int(s):
            return Success(int(s)) if s.isdigit() else Failure("not a number")

        self.assertEqual(not_blank("42").and_then(to_int), Success(42))
        self.assertEqual(not_blank(" ").and_then(to_int), Failure("blank"))
        self.assertEqual(not_blank("x").and_then(to_int), Failure("not a number"))


class TestSequence(unittest.TestCase):
    def test_sequence_success(self):
        self.assertEqual(sequence([Success(1), Success(2)]), Success([1, 2]))
        self.assertEqual(sequence([]), Success([]))

    def test_sequence_accumulates(self):
        r = sequence([Failure(["a"]), Success(2), Failure(["c"])])
        self.assertEqual(r, Failure(["a", "c"]))

    def test_traverse(self):
        self.assertEqual(traverse(_check_positive, [1, 2, 3]), Success([1, 2, 3]))
        self.assertEqual(traverse(_check_positive, [1, -2, 0]), Failure(["-2 not positive", "0 not positive"]))


if __name__ == "__main__":
    unittest.main()
