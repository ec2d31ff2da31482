from ..config import logger
from ..utils.output_utils import write_finding


def collect_findings(self):
    """
    Writes findings from self.results to self.out in arrival order until the
    closing sentinel is received. Returns per-kind counts.
    """
    counts = {}
    writable = True
    while True:
        finding = self.results.get()
        if finding is self.CLOSED:
            break
        counts[finding.kind] = counts.get(finding.kind, 0) + 1
        if not writable:
            continue
        try:
            write_finding(self.out, finding)
        except (OSError, ValueError) as e:
            # Workers must never block on a full result queue; keep draining
            logger.error(f"Error writing output: {e}")
            writable = False
    return counts
