from unitree import TestCase, skip


class StringsUt(TestCase):
    def test_upper(self):
        assert "abc".upper() == "ABC"

    def test_split(self):
        assert "a,b".split(",") == ["a", "b"]

    def test_display_width(self):
        skip("needs a wide-character table")
