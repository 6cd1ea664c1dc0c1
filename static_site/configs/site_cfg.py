"""
Project configuration for the static site CDK app.

This module provides typed, immutable views of the settings stored under the
``staticsite`` key of cdk.json. Site settings may be given at the top level
of that block and overridden per environment; the active environment is
selected with ``-c staticsite.env=<name>``.
"""

from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union
from aws_cdk import App, Environment, Stack
from static_site.configs.schema import validate_site_context

SITE_KEYS = (
    "domain_name",
    "subdomains",
    "certificate_arn",
    "ssm_certificate_prefix",
    "site_directory",
)

@dataclass(frozen=True)
class SiteProps:
    """
    Options accepted by the static site stack.

    Attributes:
        domain_name: Custom domain; without it only the CloudFront domain is served
        subdomains: Alias labels, ``""`` being the apex (default ``www`` and apex)
        certificate_arn: ACM certificate ARN; skips the SSM lookup when set
        ssm_certificate_prefix: Prefix of the SSM key holding the certificate ARN
        site_directory: Directory whose contents are uploaded to the bucket
    """
    domain_name: Optional[str] = None
    subdomains: Optional[Tuple[str, ...]] = None
    certificate_arn: Optional[str] = None
    ssm_certificate_prefix: Optional[str] = None
    site_directory: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SiteProps":
        subdomains = data.get("subdomains")
        return cls(
            domain_name=data.get("domain_name"),
            subdomains=tuple(subdomains) if subdomains is not None else None,
            certificate_arn=data.get("certificate_arn"),
            ssm_certificate_prefix=data.get("ssm_certificate_prefix"),
            site_directory=data.get("site_directory"),
        )

    def as_kwargs(self) -> Dict[str, Any]:
        """
        Keyword arguments for ``StaticSiteStack``, omitting unset options.
        """
        kwargs = {k: getattr(self, k) for k in SITE_KEYS if getattr(self, k) is not None}
        if "subdomains" in kwargs:
            kwargs["subdomains"] = list(kwargs["subdomains"])
        return kwargs

@dataclass(frozen=True)
class EnvCfg:
    """
    Deployment environment settings.

    Attributes:
        name: Environment name
        region: AWS region
        account_id: AWS account ID, falls back to ``CDK_DEFAULT_ACCOUNT``
    """
    name: str
    region: str
    account_id: Optional[str] = None

    @property
    def cdk_environment(self) -> Environment:
        return Environment(
            account=self.account_id or os.environ.get("CDK_DEFAULT_ACCOUNT"),
            region=self.region,
        )

@dataclass(frozen=True)
class SiteCfg:
    """
    Main project configuration container.

    Attributes:
        stack_name: Construct id of the site stack (also the fallback bucket name)
        env: Environment configuration
        site: Site options for the active environment
    """
    stack_name: str
    env: EnvCfg
    site: SiteProps = field(default_factory=SiteProps)

def _node(obj: Union[App, Stack]):
    """
    Get the CDK node from an App or Stack.
    """
    return (obj if isinstance(obj, App) else Stack.of(obj)).node

def get_cfg(obj: Union[App, Stack]) -> SiteCfg:
    """
    Load project configuration from cdk.json context.

    Reads the ``staticsite`` block, validates it against the bundled schema,
    and merges the active environment's overrides over the top-level site
    settings.

    Args:
        obj: CDK App or Stack instance

    Returns:
        Validated project configuration

    Raises:
        ValueError: If the context block does not match the schema
    """
    node = _node(obj)
    ctx = node.try_get_context("staticsite") or {}
    validate_site_context(ctx)

    env_name = (node.try_get_context("staticsite.env") or ctx.get("env") or "dev").lower()
    env_ctx = ctx.get(env_name) or {}

    site = {k: ctx[k] for k in SITE_KEYS if k in ctx}
    site.update({k: env_ctx[k] for k in SITE_KEYS if k in env_ctx})

    return SiteCfg(
        stack_name=ctx.get("stack_name", "static-site"),
        env=EnvCfg(
            name=env_name,
            region=env_ctx.get("region") or ctx.get("region", "us-east-1"),
            account_id=env_ctx.get("account_id"),
        ),
        site=SiteProps.from_dict(site),
    )
