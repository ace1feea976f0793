from unitree import Suite


class IoUts(Suite):
    """Runs every path test, then the suffix test again on its own."""

    def __init__(self, reporter, **kwargs):
        super().__init__(reporter, **kwargs)
        self.add(["paths_ut", "paths_ut:test_suffix"])
