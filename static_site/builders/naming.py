"""
Pure naming helpers for the static site builder.

Bucket naming, CloudFront aliases and the SSM certificate path are derived
here from plain Python values so they can be unit-tested without
synthesising a stack. Nothing in this module touches CDK types.
"""

from __future__ import annotations
from typing import List, Optional, Sequence

DEFAULT_SUBDOMAINS: tuple[str, ...] = ("www", "")
DEFAULT_CERTIFICATE_PREFIX = "/certificates/"
DEFAULT_SITE_DIRECTORY = "./dist"

# CDK context lookups answer with this prefix until the CLI resolves them.
LOOKUP_PLACEHOLDER_PREFIX = "dummy-value-for-"

def resolve_subdomains(subdomains: Optional[Sequence[str]]) -> List[str]:
    """
    Return the configured subdomains, or the default ``["www", ""]``.

    An explicit empty list is kept as is.
    """
    if subdomains is None:
        return list(DEFAULT_SUBDOMAINS)
    return list(subdomains)

def alias_for(subdomain: str, domain: str) -> str:
    """
    Build a single host name; the empty subdomain denotes the apex.
    """
    return f"{subdomain}.{domain}" if subdomain else domain

def bucket_name_for(
        stack_id: str,
        domain: Optional[str],
        subdomains: Sequence[str]
    ) -> str:
    """
    Derive the site bucket name.

    Args:
        stack_id: Construct id of the owning stack, used when no domain is set
        domain: Optional custom domain
        subdomains: Resolved subdomain list

    Returns:
        ``<first>.<domain>`` when the first subdomain is non-empty,
        ``<domain>`` when it is empty or the list is empty, else ``stack_id``
    """
    if not domain:
        return stack_id
    if subdomains and subdomains[0]:
        return alias_for(subdomains[0], domain)
    return domain

def aliases_for(domain: Optional[str], subdomains: Sequence[str]) -> List[str]:
    """
    Return the CloudFront alias list, in subdomain order. Empty without a domain.
    """
    if not domain:
        return []
    return [alias_for(subdomain, domain) for subdomain in subdomains]

def certificate_parameter_name(domain: str, prefix: Optional[str] = None) -> str:
    """
    SSM parameter path holding the certificate ARN for ``domain``.
    """
    return f"{prefix or DEFAULT_CERTIFICATE_PREFIX}{domain}"

def is_lookup_placeholder(value: str) -> bool:
    """
    True while a context lookup is still unresolved on the first synth pass.
    """
    return value.startswith(LOOKUP_PLACEHOLDER_PREFIX)

def placeholder_certificate_arn(account: str) -> str:
    """
    A parseable us-east-1 ACM ARN standing in for an unresolved lookup.
    """
    return f"arn:aws:acm:us-east-1:{account}:certificate/{LOOKUP_PLACEHOLDER_PREFIX}certificate"
