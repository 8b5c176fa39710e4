"""Concurrent reachability probing of discovered links.

Every distinct URL is fetched once by a bounded ``ThreadPoolExecutor``.
Outcomes are fanned back in through ``as_completed``; the collecting loop is
the only place the inaccessible count is written.  Per-link failures of any
kind (transport error, non-2xx status, timeout, deadline) are folded into
that count and never raised.
"""

from __future__ import annotations

import logging
import threading
from collections import Counter
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeoutError, as_completed
from typing import Iterable, Optional

import httpx

from pageinfo.config import settings

logger = logging.getLogger(__name__)


def probe_link(
    client: httpx.Client,
    url: str,
    cancelled: Optional[threading.Event] = None,
) -> bool:
    """Return ``True`` if a ``GET`` of *url* ends in a 2xx response.

    The body is streamed and never read.  Any transport error, invalid URL,
    unencodable host name or non-success status yields ``False``.

    The client timeout bounds each connect, read and write step, not the
    probe as a whole; a server trickling bytes is only cut off by the
    overall deadline in :func:`probe_links`.
    """
    if cancelled is not None and cancelled.is_set():
        return False
    try:
        with client.stream("GET", url) as response:
            if response.is_success:
                return True
            logger.debug("Probe %s -> HTTP %d", url, response.status_code)
            return False
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
        # ValueError covers IDNA failures (UnicodeError, idna.IDNAError).
        logger.debug("Probe %s failed: %s", url, exc)
        return False


def probe_links(
    urls: Iterable[str],
    *,
    concurrency: Optional[int] = None,
    timeout: Optional[float] = None,
    deadline: Optional[float] = None,
) -> int:
    """Probe every URL in *urls* and return how many are unreachable.

    Args:
        urls: Resolved link URLs; duplicates are probed once but counted
            once per occurrence.
        concurrency: Maximum number of probes in flight.  Defaults to
            ``settings.probe_concurrency``.
        timeout: Per-step (connect, read, write, pool) timeout of each probe
            in seconds.  Defaults to ``settings.probe_timeout``.
        deadline: Overall budget in seconds for the whole run.  Defaults to
            ``settings.probe_deadline``.  URLs without an outcome when it
            expires count as unreachable.

    Returns:
        The number of links (with multiplicity) that were not reachable.
    """
    occurrences = Counter(urls)
    if not occurrences:
        return 0

    concurrency = settings.probe_concurrency if concurrency is None else concurrency
    timeout = settings.probe_timeout if timeout is None else timeout
    deadline = settings.probe_deadline if deadline is None else deadline
    if concurrency < 1:
        raise ValueError(f"concurrency must be at least 1, got {concurrency}")

    outstanding = set(occurrences)
    inaccessible = 0
    cancelled = threading.Event()

    client = httpx.Client(
        headers={"User-Agent": settings.user_agent},
        timeout=timeout,
        follow_redirects=True,
    )
    pool = ThreadPoolExecutor(
        max_workers=min(concurrency, len(occurrences)),
        thread_name_prefix="probe",
    )
    try:
        future_to_url = {
            pool.submit(probe_link, client, url, cancelled): url for url in occurrences
        }
        try:
            for future in as_completed(future_to_url, timeout=deadline):
                url = future_to_url[future]
                outstanding.discard(url)
                try:
                    reachable = future.result()
                except Exception as exc:
                    logger.debug("Probe %s raised %r", url, exc)
                    reachable = False
                if not reachable:
                    inaccessible += occurrences[url]
        except FuturesTimeoutError:
            logger.warning(
                "Probe deadline of %.1fs expired with %d of %d link(s) outstanding",
                deadline,
                len(outstanding),
                len(occurrences),
            )
    finally:
        # Stop queued probes, then close the client so in-flight ones abort.
        cancelled.set()
        pool.shutdown(wait=False, cancel_futures=True)
        client.close()

    inaccessible += sum(occurrences[url] for url in outstanding)
    logger.debug(
        "Probed %d distinct link(s): %d inaccessible occurrence(s)",
        len(occurrences),
        inaccessible,
    )
    return inaccessible
