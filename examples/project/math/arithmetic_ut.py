from unitree import TestCase


class ArithmeticUt(TestCase):
    def setup(self):
        self.values = [1, 2, 3]

    def test_sum(self):
        assert sum(self.values) == 6

    def test_floor_division(self):
        assert 7 // 2 == 3

    def test_float_equality(self):
        # fails on purpose to show how failures are reported
        assert 0.1 + 0.2 == 0.3, "0.1 + 0.2 is not exactly 0.3"
