from .config import logger, make_config
from .utils.dns_utils import lookup_cname, resolves
from .utils.output_utils import OK, DANGLING, TAKEOVER
from .phases.dispatch import dispatch_jobs
from .phases.resolution import process_domain
from .phases.classification import classify_service
from .phases.collection import collect_findings

from concurrent.futures import ThreadPoolExecutor
import queue
import random
import sys


class DanglingCnameScanner:
    """
    Scans a batch of domains for CNAMEs whose target no longer resolves.

    One dispatcher (the calling thread) feeds a bounded job queue drained by
    `concurrency` workers; workers feed a bounded result queue drained by a
    single collector that writes findings to `out`. Each worker handles one
    job at a time, so at most `concurrency` lookups are in flight.
    """

    # Queue sentinel marking that no more items will follow
    CLOSED = object()

    def __init__(self, config=None, rng=None, lookup=None, verifier=None, classifier=None, out=None):
        self.config = config if config else make_config()
        self.rng = rng if rng else random.Random()
        self.lookup = lookup if lookup else self._lookup
        self.verifier = verifier if verifier else self._verify
        self.classifier = classifier if classifier else classify_service
        self.out = out if out else sys.stdout

        self.jobs = None
        self.results = None

    def _lookup(self, domain, server):
        return lookup_cname(domain, server, self.config.timeout, self.config.retries)

    def _verify(self, target):
        return resolves(target, self.config.timeout)

    def _worker(self):
        while True:
            job = self.jobs.get()
            if job is self.CLOSED:
                return
            try:
                process_domain(self, job)
            except Exception as e:
                logger.error(f" [!] Unexpected error while scanning {job.domain}: {e}", exc_info=True)

    def run(self, lines, stop_event=None):
        """
        Scans every domain in `lines` and blocks until all findings are written.

        Setting `stop_event` stops reading input; queued jobs still finish.
        Returns a summary dict with the number of jobs and findings per kind.
        """
        concurrency = self.config.concurrency
        self.jobs = queue.Queue(maxsize=concurrency * 2)
        self.results = queue.Queue(maxsize=concurrency)
        dispatched = 0

        collector_pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix='cnamesweep-collector')
        collector = collector_pool.submit(collect_findings, self)
        try:
            with ThreadPoolExecutor(max_workers=concurrency, thread_name_prefix='cnamesweep-worker') as workers:
                for _ in range(concurrency):
                    workers.submit(self._worker)
                try:
                    dispatched = dispatch_jobs(self, lines, stop_event)
                finally:
                    for _ in range(concurrency):
                        self.jobs.put(self.CLOSED)
        finally:
            # Every worker has exited, nothing else can reach the result queue
            self.results.put(self.CLOSED)
            collector_pool.shutdown(wait=True)

        counts = collector.result()
        summary = {
            'jobs': dispatched,
            'ok': counts.get(OK, 0),
            'dangling': counts.get(DANGLING, 0),
            'takeover': counts.get(TAKEOVER, 0),
        }
        logger.info(f"[*] Scan complete. {summary['jobs']} domains scanned, "
                    f"{summary['dangling']} dangling, {summary['takeover']} potential takeovers.")
        return summary
