"""Optional dependency checks."""

from importlib.util import find_spec

from sqlbinding.exceptions import MissingDependencyError

__all__ = ("dependency_installed", "ensure_dependency")


def dependency_installed(package: str) -> bool:
    """Check whether an importable top-level package is available.

    Args:
        package: Import name of the package.

    Returns:
        True if the package can be imported.
    """
    try:
        return find_spec(package) is not None
    except (ImportError, ValueError):
        return False


def ensure_dependency(package: str, install_package: "str | None" = None) -> None:
    """Raise if an optional dependency is missing.

    Args:
        package: Import name of the package.
        install_package: Extra or distribution name to suggest, when it differs.

    Raises:
        MissingDependencyError: The package is not installed.
    """
    if not dependency_installed(package):
        raise MissingDependencyError(package=package, install_package=install_package)
