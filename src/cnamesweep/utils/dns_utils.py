import logging
import time

import backoff
import dns.exception
import dns.message
import dns.query
import dns.rdatatype
import dns.resolver

from ..config import logger, DNS_PORT


class DNSQueryError(Exception):
    """A single CNAME query failed at the transport or protocol level."""


def _strip_root(name):
    return name[:-1] if name.endswith('.') else name


def interpret_answer(response):
    """
    Extracts the CNAME target from a DNS response.

    Returns the target without its trailing dot, or '' when the name has no
    CNAME: a direct A record, an SOA in the authority section (NXDOMAIN or
    NODATA) and an empty answer all count as "no CNAME".
    """
    for rrset in response.answer:
        if rrset.rdtype == dns.rdatatype.CNAME:
            return _strip_root(str(rrset[0].target))

    for rrset in response.answer:
        if rrset.rdtype == dns.rdatatype.A:
            return ''

    for rrset in response.authority:
        if rrset.rdtype == dns.rdatatype.SOA:
            return ''

    return ''


def query_cname(domain, server, timeout, port=DNS_PORT):
    """Sends one recursive (RD) CNAME query over UDP to `server`."""
    qname = domain if domain.endswith('.') else f"{domain}."
    try:
        query = dns.message.make_query(qname, dns.rdatatype.CNAME)
        response = dns.query.udp(query, server, timeout=timeout, port=port)
    except (dns.exception.DNSException, OSError) as e:
        raise DNSQueryError(f"DNS query failed: {e}") from e
    return interpret_answer(response)


def linear_backoff(step=0.1):
    """backoff wait generator: step, 2*step, 3*step, ..."""
    # Advance past backoff's priming send()
    yield
    n = 1
    while True:
        yield step * n
        n += 1


def lookup_cname(domain, server, timeout, retries, query=query_cname):
    """
    Looks up the CNAME of `domain`, making up to `retries + 1` attempts.

    Attempt i+1 is preceded by a 100ms * i pause. The last DNSQueryError is
    re-raised once every attempt has failed.
    """
    @backoff.on_exception(linear_backoff, DNSQueryError, max_tries=retries + 1, jitter=None,
                          logger=logger, backoff_log_level=logging.DEBUG, giveup_log_level=logging.DEBUG)
    def _attempt():
        return query(domain, server, timeout)

    return _attempt()


def resolves(target, timeout):
    """
    True if `target` has at least one A or AAAA address through the system
    resolver. Both lookups share one `timeout` budget; a failure of one
    family does not hide addresses of the other.
    """
    target = _strip_root(target)
    try:
        resolver = dns.resolver.Resolver()
    except (dns.exception.DNSException, OSError) as e:
        logger.debug(f" [!] No system resolver available for {target}: {e}")
        return False

    deadline = time.monotonic() + timeout
    for rdtype in ('A', 'AAAA'):
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            break
        try:
            answers = resolver.resolve(target, rdtype, lifetime=remaining, raise_on_no_answer=False)
        except dns.resolver.NXDOMAIN:
            logger.debug(f" [.] {target} does not exist.")
            return False
        except (dns.exception.DNSException, OSError) as e:
            logger.debug(f" [.] {rdtype} lookup for {target} failed: {e}")
            continue
        if answers.rrset:
            return True
    return False
