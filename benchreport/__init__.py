"""benchreport - Lifecycle-driven text reporting for benchmark runs."""

from benchreport.version.benchreport_version import BENCHREPORT_VERSION, Version

__version__ = str(BENCHREPORT_VERSION)
__version_info__ = BENCHREPORT_VERSION

__all__ = [
    "BENCHREPORT_VERSION",
    "Version",
    "__version__",
    "__version_info__",
]
