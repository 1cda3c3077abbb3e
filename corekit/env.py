"""Reading and writing process environment variables."""

from __future__ import annotations

import os

__all__ = ["get_env_var", "set_env_var"]


def _validate_name(env_var: str | None) -> str:
    if env_var is None:
        raise RuntimeError("environment variable name must not be None")
    if not env_var:
        raise RuntimeError("environment variable name must not be empty")
    if "=" in env_var:
        raise RuntimeError(f"invalid environment variable name: {env_var!r}")
    return env_var


def get_env_var(env_var: str | None) -> str:
    """Return the value of ``env_var``, or ``""`` if it is not set.

    :raises RuntimeError: if the name is ``None``.
    """
    if env_var is None:
        raise RuntimeError("environment variable name must not be None")
    return os.environ.get(env_var, "")


def set_env_var(env_var: str | None, env_value: str | None) -> bool:
    """Set ``env_var`` to ``env_value``, or unset it when ``env_value`` is ``None``.

    :returns: ``True`` on success.
    :raises RuntimeError: if the name is invalid or setting the variable fails.
    """
    name = _validate_name(env_var)
    try:
        if env_value is None:
            os.environ.pop(name, None)
        else:
            os.environ[name] = env_value
    except (OSError, ValueError) as exc:
        raise RuntimeError(f"failed to set environment variable {name!r}: {exc}") from exc
    return True