"""Locating shader sources and model files next to the executable."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ShaderPaths:
    """Source files of one shader program."""

    vertex: str
    fragment: str
    geometry: str | None = None


def _directory_prefix(executable_path: str) -> str:
    """Return the executable's directory including its trailing separator."""
    cut = max(executable_path.rfind("/"), executable_path.rfind("\\"))
    return executable_path[: cut + 1]


def shader_paths(executable_path: str, name: str, with_geometry: bool = False) -> ShaderPaths:
    """Return the paths of shader ``name`` in the ``shaders`` directory beside the executable.

    The separator of the executable path is reused. A path without any
    directory separator is rejected.
    """
    prefix = _directory_prefix(executable_path)
    if prefix.endswith("/"):
        base = f"{prefix}shaders/{name}"
    elif prefix.endswith("\\"):
        base = f"{prefix}shaders\\{name}"
    else:
        raise ValueError(f"cannot locate shaders relative to {executable_path!r}")

    return ShaderPaths(
        vertex=f"{base}.vert",
        fragment=f"{base}.frag",
        geometry=f"{base}.geom" if with_geometry else None,
    )


def model_path(executable_path: str) -> str:
    """Return the path of the spaceship model in the resources beside the executable."""
    cut = max(executable_path.rfind("/"), executable_path.rfind("\\"))
    directory = executable_path if cut < 0 else executable_path[:cut]
    return directory + "\\resources\\spaceship\\spaceship.obj"