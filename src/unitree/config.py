"""Discovery and run configuration."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_ROOT_NAME = "All tests"


class UnitreeSettings(BaseSettings):
    """Configuration for discovery conventions and run behavior.

    Loads from environment variables automatically:
        UNITREE_CASE_SUFFIX, UNITREE_SUITE_SUFFIX, UNITREE_DEFINITION_EXTENSION,
        UNITREE_METHOD_SEPARATOR, UNITREE_RELOAD, UNITREE_FAILURES_ONLY, UNITREE_ROOT_NAME

    Or pass values directly to Runner / Suite.
    """

    case_suffix: str = Field(default="_ut", min_length=1, description="Name suffix of leaf test case files")
    suite_suffix: str = Field(default="_uts", min_length=1, description="Name suffix of suite files")
    definition_extension: str = Field(
        default=".py", min_length=1, description="Extension stripped from a file name to get its type identifier"
    )
    method_separator: str = Field(default=":", description="Separates a type identifier from a single test name")
    reload: bool = Field(default=True, description="Reload file-backed test definitions before construction")
    failures_only: bool = Field(default=False, description="Only report branches of the tree that failed")
    root_name: str = Field(default=DEFAULT_ROOT_NAME, description="Name of the root suite built by the runner")

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="UNITREE_",
    )

    @field_validator("method_separator")
    @classmethod
    def single_character(cls, v: str) -> str:
        if len(v) != 1:
            msg = f"method_separator must be a single character, got {v!r}"
            raise ValueError(msg)
        return v

    @property
    def case_pattern(self) -> str:
        """Lower-cased file name ending of leaf test case files, e.g. ``_ut.py``."""
        return (self.case_suffix + self.definition_extension).lower()

    @property
    def suite_pattern(self) -> str:
        """Lower-cased file name ending of suite files, e.g. ``_uts.py``."""
        return (self.suite_suffix + self.definition_extension).lower()

    @property
    def strip_length(self) -> int:
        """Number of trailing characters removed from a file name to get its identifier."""
        return len(self.definition_extension)


@lru_cache(maxsize=1)
def get_settings() -> UnitreeSettings:
    """Get the process-wide settings, read once from the environment."""
    return UnitreeSettings()
