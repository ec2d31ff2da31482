from collections import namedtuple

from ..config import logger

Job = namedtuple('Job', ['domain', 'server'])


def normalize_domain(line):
    return line.strip().lower()


def dispatch_jobs(self, lines, stop_event=None):
    """
    Turns input lines into Jobs on self.jobs, one per non-blank line, each
    bound to a randomly chosen resolver. Blocks while the job queue is full.

    A read error ends dispatch early; jobs already queued still get processed.
    Returns the number of jobs queued.
    """
    dispatched = 0
    try:
        for line in lines:
            if stop_event is not None and stop_event.is_set():
                logger.info(" [!] Stop requested. Remaining input will not be scanned.")
                break
            domain = normalize_domain(line)
            if not domain:
                continue
            server = self.rng.choice(self.config.resolvers)
            self.jobs.put(Job(domain, server))
            dispatched += 1
    except (OSError, ValueError) as e:
        logger.error(f"Error reading input: {e}")
    return dispatched
