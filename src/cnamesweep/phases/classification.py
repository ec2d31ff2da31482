from ..config import VULNERABLE_SERVICES


def classify_service(cname, table=VULNERABLE_SERVICES):
    """
    Returns the service name of the first table pattern contained in `cname`,
    or '' when none matches. Table order decides between overlapping patterns.
    """
    cname = cname.lower()
    for pattern, service in table:
        if pattern in cname:
            return service
    return ''
