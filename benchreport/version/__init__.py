"""Version information for benchreport."""

from benchreport.version.benchreport_version import BENCHREPORT_VERSION, Version

__all__ = ["BENCHREPORT_VERSION", "Version"]
