"""
Static website builder for the static site CDK project.

This module provides a builder for a public S3 website bucket fronted by a
CloudFront distribution. When a custom domain is configured the builder
looks up the Route 53 hosted zone and the ACM certificate, attaches the
aliases to the distribution and points one A record per subdomain at it.
Site files are deployed with BucketDeployment, which invalidates the
distribution once the upload has finished.
"""

from __future__ import annotations
import logging
from typing import List, Optional, Sequence
from aws_cdk import (
    aws_certificatemanager as acm,
    aws_cloudfront as cloudfront,
    aws_cloudfront_origins as origins,
    aws_route53 as route53,
    aws_route53_targets as targets,
    aws_s3 as s3,
    aws_s3_deployment as s3_deployment,
    aws_ssm as ssm,
    Stack,
)
from constructs import Construct
from static_site.builders import naming
from static_site.configs.error_handler import ErrorHandler

logger = logging.getLogger(__name__)

INVALIDATION_PATHS = ["/*"]

class StaticWebsite(Construct):
    """
    Static website builder using S3, CloudFront and optionally Route 53.

    Attributes:
        bucket: Website bucket holding the site files
        distribution: CloudFront distribution serving the bucket
        zone: Looked-up hosted zone, None without a custom domain
        records: A records created in ``zone``, in subdomain order
        deployment: Upload-and-invalidate deployment of the site directory
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
        ) -> None:
        """
        Initialize the static website builder.

        Args:
            scope: CDK construct scope
            construct_id: Construct ID
            domain_name: Custom domain; aliases and records are skipped without it
            subdomains: Alias labels, defaults to ``["www", ""]``
            certificate_arn: ACM certificate ARN, bypasses the SSM lookup
            ssm_certificate_prefix: SSM key prefix for the certificate ARN
            site_directory: Directory uploaded to the bucket, defaults to ``./dist``

        Raises:
            TypeError: If subdomains is not a sequence of strings
            ValueError: If domain_name is given but blank
            FileNotFoundError: If the site directory does not exist
        """
        super().__init__(scope, construct_id)

        stack = Stack.of(self)
        if subdomains is not None:
            ErrorHandler.validate_string_list(subdomains, "subdomains", "Static site")
        self.subdomains = naming.resolve_subdomains(subdomains)
        if domain_name is not None:
            ErrorHandler.validate_string_not_empty(domain_name, "domain_name", "Static site")

        self.site_directory = site_directory or naming.DEFAULT_SITE_DIRECTORY
        ErrorHandler.validate_path_exists(self.site_directory, "Site directory")

        self.bucket_name = naming.bucket_name_for(stack.node.id, domain_name, self.subdomains)
        self.aliases: List[str] = naming.aliases_for(domain_name, self.subdomains)
        logger.debug("Site bucket %s, aliases %s", self.bucket_name, self.aliases)

        # Public website bucket; index.html doubles as the error page for client-side routing
        self.bucket = s3.Bucket(
            self,
            "WebsiteBucket",
            bucket_name=self.bucket_name,
            versioned=True,
            website_index_document="index.html",
            website_error_document="index.html",
            public_read_access=True,
            block_public_access=s3.BlockPublicAccess(
                block_public_policy=False,
                block_public_acls=False,
                ignore_public_acls=False,
                restrict_public_buckets=False
            ),
        )

        self.zone: Optional[route53.IHostedZone] = None
        certificate: Optional[acm.ICertificate] = None
        if domain_name:
            cert_arn = certificate_arn or self._lookup_certificate_arn(domain_name, ssm_certificate_prefix)
            # The zone for this domain must already exist in Route 53
            self.zone = route53.HostedZone.from_lookup(self, "HostedZone", domain_name=domain_name)
            if self.aliases:
                certificate = acm.Certificate.from_certificate_arn(self, "Certificate", cert_arn)

        self.distribution = cloudfront.Distribution(
            self,
            "WebsiteDistribution",
            default_behavior=cloudfront.BehaviorOptions(
                origin=origins.S3StaticWebsiteOrigin(self.bucket),
                viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
            ),
            default_root_object="index.html",
            domain_names=self.aliases or None,
            certificate=certificate,
        )

        self.records: List[route53.ARecord] = []
        if self.zone is not None and self.subdomains:
            alias_target = route53.RecordTarget.from_alias(targets.CloudFrontTarget(self.distribution))
            for subdomain in self.subdomains:
                self.records.append(
                    route53.ARecord(
                        self,
                        f"ARecord-{subdomain}",
                        zone=self.zone,
                        # None lets the record default to the zone apex
                        record_name=subdomain or None,
                        target=alias_target,
                    )
                )

        # Upload the site, then invalidate the distribution cache
        self.deployment = s3_deployment.BucketDeployment(
            self,
            "DeployWebsite",
            sources=[s3_deployment.Source.asset(self.site_directory)],
            destination_bucket=self.bucket,
            distribution=self.distribution,
            distribution_paths=INVALIDATION_PATHS,
        )

    def _lookup_certificate_arn(self, domain_name: str, prefix: Optional[str]) -> str:
        """
        Read the certificate ARN from SSM at synth time.

        Returns a parseable placeholder ARN while the context lookup is still
        pending, so the first synth pass can complete.
        """
        parameter_name = naming.certificate_parameter_name(domain_name, prefix)
        value = ssm.StringParameter.value_from_lookup(self, parameter_name)
        if naming.is_lookup_placeholder(value):
            logger.info("SSM parameter %s not in context yet, using placeholder ARN", parameter_name)
            return naming.placeholder_certificate_arn(Stack.of(self).account)
        return value
