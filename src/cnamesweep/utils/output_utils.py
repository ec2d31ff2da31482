from collections import namedtuple

OK = 'OK'
DANGLING = 'DANGLING'
TAKEOVER = 'TAKEOVER'


class Finding(namedtuple('Finding', ['kind', 'domain', 'cname', 'service'])):
    __slots__ = ()

    def render(self):
        if self.kind == OK:
            return f"[OK] {self.domain} -> {self.cname}"
        if self.kind == DANGLING:
            return f"[DANGLING] {self.domain} -> {self.cname} (does not resolve)"
        if self.kind == TAKEOVER:
            return f"[TAKEOVER] {self.domain} -> {self.cname} (vulnerable: {self.service})"
        raise ValueError(f"unknown finding kind: {self.kind!r}")


def ok_finding(domain, cname):
    return Finding(OK, domain, cname, '')


def dangling_finding(domain, cname):
    return Finding(DANGLING, domain, cname, '')


def takeover_finding(domain, cname, service):
    return Finding(TAKEOVER, domain, cname, service)


def write_finding(stream, finding):
    stream.write(finding.render() + '\n')
    stream.flush()
