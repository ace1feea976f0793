"""Run the example project tree with the console reporter."""

from pathlib import Path

from unitree import Runner


def main():
    project = Path(__file__).parent / "project"

    # Full tree: every suite, case and test result
    Runner().run(home=project)

    # Only the branches that failed, printed after the run
    Runner(failures_only=True).run(home=project)


if __name__ == "__main__":
    main()
