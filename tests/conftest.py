import aws_cdk as cdk
import pytest
from aws_cdk.assertions import Template

from static_site.stacks.site_stack import StaticSiteStack

ACCOUNT = "123456789012"
ENV = cdk.Environment(account=ACCOUNT, region="us-east-1")
CERT_ARN = f"arn:aws:acm:us-east-1:{ACCOUNT}:certificate/0f1e2d3c-aaaa-bbbb-cccc-123456789abc"


@pytest.fixture
def site_dir(tmp_path):
    d = tmp_path / "dist"
    d.mkdir()
    (d / "index.html").write_text("<html><body>hello</body></html>", encoding="utf-8")
    return d


@pytest.fixture
def synth(site_dir):
    """Build a StaticSiteStack in a fresh App and return (stack, template)."""

    def _synth(construct_id="static-site-test", context=None, **props):
        props.setdefault("site_directory", str(site_dir))
        app = cdk.App(context=context)
        stack = StaticSiteStack(app, construct_id, env=ENV, **props)
        return stack, Template.from_stack(stack)

    return _synth


@pytest.fixture
def account():
    return ACCOUNT


@pytest.fixture
def cert_arn():
    return CERT_ARN
