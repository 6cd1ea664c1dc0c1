"""
Static site stack for the static site CDK project.

This stack creates the static website infrastructure using the StaticWebsite
builder and surfaces the distribution and bucket identifiers as outputs.
"""

from __future__ import annotations
from typing import Optional, Sequence

from aws_cdk import CfnOutput, Stack
from constructs import Construct

from static_site.builders.static_site_builder import StaticWebsite


class StaticSiteStack(Stack):
    """
    Stack for deploying a static website behind CloudFront.

    Without a domain only the default CloudFront domain is served and the
    bucket is named after this stack's construct id.
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        domain_name: Optional[str] = None,
        subdomains: Optional[Sequence[str]] = None,
        certificate_arn: Optional[str] = None,
        ssm_certificate_prefix: Optional[str] = None,
        site_directory: Optional[str] = None,
        **kwargs,
    ) -> None:
        """
        Initialize the static site stack.

        Args:
            scope: CDK construct scope
            construct_id: Construct ID
            domain_name: Custom domain for aliases and DNS records
            subdomains: Alias labels, defaults to ``["www", ""]``
            certificate_arn: ACM certificate ARN, bypasses the SSM lookup
            ssm_certificate_prefix: SSM key prefix, defaults to ``/certificates/``
            site_directory: Directory uploaded to the bucket, defaults to ``./dist``
            **kwargs: Additional stack properties
        """
        super().__init__(scope, construct_id, **kwargs)
        self.site = StaticWebsite(
            self,
            "Site",
            domain_name=domain_name,
            subdomains=subdomains,
            certificate_arn=certificate_arn,
            ssm_certificate_prefix=ssm_certificate_prefix,
            site_directory=site_directory,
        )

        CfnOutput(
            self,
            "DistributionDomainName",
            value=self.site.distribution.distribution_domain_name,
            description="CloudFront distribution domain name",
        )
        CfnOutput(
            self,
            "DistributionId",
            value=self.site.distribution.distribution_id,
            description="CloudFront distribution ID",
        )
        CfnOutput(
            self,
            "WebsiteBucket",
            value=self.site.bucket.bucket_name,
            description="S3 bucket holding the site files",
        )
