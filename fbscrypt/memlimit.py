"""Work out how much memory a computation may use on this system."""

from __future__ import annotations

import errno
import os
import sys

try:
    import resource
except ImportError:  # pragma: no cover - platforms without resource limits
    resource = None  # type: ignore[assignment]

_SIZE_MAX = sys.maxsize * 2 + 1
_UINT64_MAX = 2**64 - 1
_MIN_MEMORY = 1048576


def _clamp(value: int) -> int:
    return min(value, _SIZE_MAX)


def _rlimit_memlimit() -> int:
    """Return the least of the address-space, data and RSS soft limits."""
    if resource is None:
        return _SIZE_MAX
    limit = _UINT64_MAX
    for name in ("RLIMIT_AS", "RLIMIT_DATA", "RLIMIT_RSS"):
        which = getattr(resource, name, None)
        if which is None:
            continue
        soft, _hard = resource.getrlimit(which)
        if soft == resource.RLIM_INFINITY or soft < 0:
            continue
        limit = min(limit, soft)
    return _clamp(limit)


def _sysconf_memlimit() -> int:
    """Return the physical memory size reported by sysconf."""
    if not hasattr(os, "sysconf"):
        return _SIZE_MAX
    names = os.sysconf_names
    if "SC_PHYS_PAGES" not in names:
        return _SIZE_MAX
    pagesize_name = "SC_PAGE_SIZE" if "SC_PAGE_SIZE" in names else "SC_PAGESIZE"
    try:
        pagesize = os.sysconf(pagesize_name)
        physpages = os.sysconf("SC_PHYS_PAGES")
    except OSError as exc:
        # Some systems report EINVAL for a name they define but do not support.
        if exc.errno not in (0, errno.EINVAL):
            raise
        return _clamp(_UINT64_MAX)
    if pagesize == -1 or physpages == -1:
        return _clamp(_UINT64_MAX)
    return _clamp(pagesize * physpages)


def memtouse(maxmem: int, maxmemfrac: float) -> int:
    """Return how many bytes of RAM to use.

    That is the fraction ``maxmemfrac`` (at most 0.5; 0 means 0.5) of the
    available memory, no more than ``maxmem`` if it is positive, and never
    less than 1 MiB. Raises OSError if the system limits cannot be read.
    """
    memlimit_min = min(_SIZE_MAX, _rlimit_memlimit(), _sysconf_memlimit())

    if maxmemfrac > 0.5 or maxmemfrac == 0.0:
        maxmemfrac = 0.5
    memavail = int(maxmemfrac * memlimit_min)

    if maxmem > 0 and memavail > maxmem:
        memavail = maxmem

    return max(memavail, _MIN_MEMORY)