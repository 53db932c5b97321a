"""
Version utility functions for MediChain.
"""

# (major, minor, micro, releaselevel, serial)
VERSION = (0, 1, 0, "dev", 1)


def get_version(version: tuple[int, int, int, str, int] | None = None) -> str:
    """
    Return a PEP 440-compliant version string.

    Args:
        version: Version tuple (major, minor, micro, releaselevel, serial).
                 Defaults to the package VERSION.

    Returns:
        Version string such as "0.1.0.dev1" or "1.0.0"
    """
    major, minor, micro, releaselevel, serial = version or VERSION

    version_str = f"{major}.{minor}.{micro}"
    if releaselevel == "final":
        return version_str

    if releaselevel == "dev":
        version_str += ".dev"
    else:
        # PEP 440 pre-release markers: a, b, rc
        version_str += {"alpha": "a", "beta": "b"}.get(releaselevel, releaselevel)
    if serial > 0:
        version_str += str(serial)
    return version_str


def get_major_version(version: tuple[int, int, int, str, int] | None = None) -> str:
    """Return "major.minor" for the given version tuple."""
    major, minor, _, _, _ = version or VERSION
    return f"{major}.{minor}"
