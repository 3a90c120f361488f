"""Immutable configuration of one scanning session."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator

from ...constants import DEFAULT_LINE_MARKER, DEFAULT_MAX_CONCURRENCY
from ._validation_detail import _validation_detail
from .ConfigError import ConfigError
from .Platform import Platform


class ScanConfig(BaseModel):
    """Platform, line marker and workspace root for a scanning session.

    Built once and never mutated. ``workspace_root`` is stored normalized
    for ``platform``; relative roots are rejected. The model itself only
    checks the root syntactically: host sessions should be built with
    ``for_workspace``, which also requires the root to be an existing
    directory.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    platform: Platform = Field(default_factory=Platform.from_host, description="Path convention of the build output")
    line_marker: str = Field(DEFAULT_LINE_MARKER, min_length=1, description="Literal prefix a line must start with")
    workspace_root: str = Field(..., description="Absolute directory relative paths resolve against")
    max_concurrency: int = Field(DEFAULT_MAX_CONCURRENCY, gt=0, description="Filesystem checks in flight per scan")

    @field_validator("workspace_root")
    @classmethod
    def _absolute_root(cls, value: str, info: ValidationInfo) -> str:
        platform = info.data.get("platform")
        if platform is None:
            # platform itself failed validation, that error is reported instead
            return value
        root = value.strip()
        if not root:
            raise ValueError("workspace_root must not be empty")
        pathmod = platform.pathmod
        if not platform.is_absolute(root):
            raise ValueError(f"workspace_root must be an absolute {platform.value} path, got {root!r}")
        return pathmod.normpath(root)

    @classmethod
    def for_workspace(
        cls,
        workspace_root: str | Path,
        *,
        line_marker: str | None = None,
        platform: Platform | None = None,
        max_concurrency: int | None = None,
    ) -> "ScanConfig":
        """Build a session config, verifying the workspace root up front.

        When ``platform`` is the host platform the root is expanded (``~``),
        made absolute and must be an existing directory. A foreign platform
        only gets the syntactic check, since its paths cannot be queried here.

        Raises:
            ConfigError: If the root is missing, relative, not a directory,
                or any other field is invalid.
        """
        platform = platform or Platform.from_host()
        root = str(workspace_root).strip()
        if not root:
            raise ConfigError("Workspace root is required")

        if platform is Platform.from_host():
            root_path = Path(root).expanduser().absolute()
            if not root_path.is_dir():
                raise ConfigError(f"Workspace root is not a directory: {root_path}")
            root = str(root_path)

        kwargs: dict = {"platform": platform, "workspace_root": root}
        if line_marker is not None:
            kwargs["line_marker"] = line_marker
        if max_concurrency is not None:
            kwargs["max_concurrency"] = max_concurrency

        try:
            return cls(**kwargs)
        except ValidationError as e:
            raise ConfigError(f"Invalid scan configuration: {_validation_detail(e)}") from e
