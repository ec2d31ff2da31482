from ..config import logger
from ..utils.output_utils import ok_finding, dangling_finding, takeover_finding
from ..utils.dns_utils import DNSQueryError


def process_domain(self, job):
    """
    Runs one job through lookup, verification and classification, putting
    its findings on self.results. A takeover finding always follows the
    dangling finding for the same domain.
    """
    domain = job.domain
    try:
        cname = self.lookup(domain, job.server)
    except DNSQueryError as e:
        if self.config.verbose:
            logger.info(f"Error querying {domain}: {e}")
        return

    if not cname:
        if self.config.verbose:
            logger.info(f"No CNAME for {domain}")
        return

    if self.verifier(cname):
        if self.config.verbose:
            self.results.put(ok_finding(domain, cname))
        return

    self.results.put(dangling_finding(domain, cname))
    service = self.classifier(cname)
    if service:
        self.results.put(takeover_finding(domain, cname, service))
