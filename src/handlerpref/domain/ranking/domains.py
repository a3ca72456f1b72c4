"""Domain bucket extraction from URLs."""

from __future__ import annotations

import logging

from urllib.parse import urlsplit

from handlerpref.shared.types import Domain

logger = logging.getLogger(__name__)


def domain_of(url: str) -> Domain:
    """Return the last two host labels of *url*.

    ``a.b.c.d`` gives ``c.d``, ``a.b.c`` gives ``b.c``, ``a.b`` and ``a``
    are returned as-is. Unparseable URLs and URLs without a host map to
    the empty bucket ``""``.
    """
    try:
        netloc = urlsplit(url).netloc
    except ValueError as e:
        logger.debug("Cannot extract host from %r: %s", url, e)
        return Domain("")
    host = _host_of(netloc)
    if not host:
        logger.debug("No host in %r", url)
        return Domain("")

    labels = host.split(".")
    while labels and not labels[-1]:
        labels.pop()
    return Domain(".".join(labels[-2:]))


def _host_of(netloc: str) -> str:
    """Strip userinfo and port, keeping case and IPv6 brackets."""
    hostport = netloc.rpartition("@")[2]
    if hostport.startswith("["):
        return hostport.partition("]")[0] + "]"
    return hostport.partition(":")[0]
