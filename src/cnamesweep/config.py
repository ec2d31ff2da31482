import logging
import sys
from collections import namedtuple

logger = logging.getLogger("cnamesweep")

DEFAULT_CONCURRENCY = 20
DEFAULT_TIMEOUT = 5.0
DEFAULT_RETRIES = 2
DNS_PORT = 53

# Public recursive resolvers, picked at random per domain for load distribution
DEFAULT_RESOLVERS = (
    '1.1.1.1', '1.0.0.1',                  # Cloudflare
    '8.8.8.8', '8.8.4.4',                  # Google
    '9.9.9.9', '149.112.112.112',          # Quad9
    '208.67.222.222', '208.67.220.220',    # OpenDNS
)

# Platforms known to allow claiming an abandoned CNAME target.
# Order matters: the first pattern contained in the target wins.
VULNERABLE_SERVICES = (
    ('.s3.amazonaws.com', 'AWS S3'),
    ('.s3-website', 'AWS S3'),
    ('.s3.dualstack', 'AWS S3'),
    ('.cloudfront.net', 'AWS CloudFront'),
    ('.elasticbeanstalk.com', 'AWS Elastic Beanstalk'),
    ('.herokuapp.com', 'Heroku'),
    ('.herokudns.com', 'Heroku'),
    ('.wordpress.com', 'WordPress'),
    ('.pantheonsite.io', 'Pantheon'),
    ('.github.io', 'GitHub Pages'),
    ('.gitlab.io', 'GitLab Pages'),
    ('.surge.sh', 'Surge.sh'),
    ('.bitbucket.io', 'Bitbucket'),
    ('.zendesk.com', 'Zendesk'),
    ('.desk.com', 'Desk.com'),
    ('.fastly.net', 'Fastly'),
    ('.feedpress.me', 'FeedPress'),
    ('.ghost.io', 'Ghost'),
    ('.helpjuice.com', 'Helpjuice'),
    ('.helpscoutdocs.com', 'HelpScout'),
    ('.azurewebsites.net', 'Azure'),
    ('.cloudapp.azure.com', 'Azure'),
    ('.cloudapp.net', 'Azure'),
    ('.trafficmanager.net', 'Azure Traffic Manager'),
    ('.blob.core.windows.net', 'Azure Blob'),
    ('.azureedge.net', 'Azure CDN'),
    ('.azure-api.net', 'Azure API Management'),
    ('.azurefd.net', 'Azure Front Door'),
    ('.statuspage.io', 'StatusPage'),
    ('.uservoice.com', 'UserVoice'),
    ('.smartling.com', 'Smartling'),
    ('.tictail.com', 'Tictail'),
    ('.campaignmonitor.com', 'Campaign Monitor'),
    ('.createsend.com', 'CreateSend'),
    ('.acquia-sites.com', 'Acquia'),
    ('.proposify.biz', 'Proposify'),
    ('.simplebooklet.com', 'Simplebooklet'),
    ('.getresponse.com', 'GetResponse'),
    ('.vend.com', 'Vend'),
    ('.jetbrains.space', 'JetBrains Space'),
    ('.myjetbrains.com', 'JetBrains'),
    ('.netlify.app', 'Netlify'),
    ('.netlify.com', 'Netlify'),
    ('.vercel.app', 'Vercel'),
    ('.now.sh', 'Vercel'),
)

ScanConfig = namedtuple('ScanConfig', ['concurrency', 'timeout', 'retries', 'verbose', 'resolvers'])


def make_config(concurrency=DEFAULT_CONCURRENCY, timeout=DEFAULT_TIMEOUT, retries=DEFAULT_RETRIES,
                verbose=False, resolvers=DEFAULT_RESOLVERS):
    """Builds a validated, immutable ScanConfig. Raises ValueError on bad values."""
    if concurrency < 1:
        raise ValueError(f"concurrency must be positive, got {concurrency}")
    if timeout <= 0:
        raise ValueError(f"timeout must be positive, got {timeout}")
    if retries < 0:
        raise ValueError(f"retries must not be negative, got {retries}")
    resolvers = tuple(resolvers)
    if not resolvers:
        raise ValueError("at least one resolver is required")
    return ScanConfig(int(concurrency), float(timeout), int(retries), bool(verbose), resolvers)


def configure_logging(verbose=False):
    # Findings own stdout, so diagnostics go to stderr
    logging.basicConfig(
        level=logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
