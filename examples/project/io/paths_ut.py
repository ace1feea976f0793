from pathlib import PurePosixPath

from unitree import TestCase


class PathsUt(TestCase):
    def setup(self):
        self.path = PurePosixPath("/data/run/output.csv")

    def test_suffix(self):
        assert self.path.suffix == ".csv"

    def test_parent(self):
        assert self.path.parent.name == "run"
