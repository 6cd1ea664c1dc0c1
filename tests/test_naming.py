"""Tests for pure naming helpers"""

from static_site.builders import naming


class TestResolveSubdomains:
    def test_defaults_to_www_and_apex(self):
        assert naming.resolve_subdomains(None) == ["www", ""]

    def test_keeps_explicit_empty_list(self):
        assert naming.resolve_subdomains([]) == []

    def test_copies_input(self):
        given = ("api",)
        assert naming.resolve_subdomains(given) == ["api"]


class TestBucketNameFor:
    def test_no_domain_uses_stack_id(self):
        assert naming.bucket_name_for("my-site", None, ["www", ""]) == "my-site"

    def test_default_subdomains(self):
        assert naming.bucket_name_for("my-site", "example.com", ["www", ""]) == "www.example.com"

    def test_apex_first(self):
        assert naming.bucket_name_for("my-site", "example.com", ["", "www"]) == "example.com"

    def test_empty_subdomain_list(self):
        assert naming.bucket_name_for("my-site", "example.com", []) == "example.com"


class TestAliasesFor:
    def test_no_domain(self):
        assert naming.aliases_for(None, ["www", ""]) == []

    def test_default_subdomains(self):
        assert naming.aliases_for("example.com", ["www", ""]) == ["www.example.com", "example.com"]

    def test_apex_only(self):
        assert naming.aliases_for("example.com", [""]) == ["example.com"]

    def test_keeps_order(self):
        assert naming.aliases_for("site.io", ["www", "api"]) == ["www.site.io", "api.site.io"]


class TestCertificateParameterName:
    def test_default_prefix(self):
        assert naming.certificate_parameter_name("site.io") == "/certificates/site.io"

    def test_custom_prefix(self):
        assert naming.certificate_parameter_name("site.io", "/acm/") == "/acm/site.io"


class TestLookupPlaceholder:
    def test_detects_dummy_value(self):
        assert naming.is_lookup_placeholder("dummy-value-for-/certificates/site.io")

    def test_real_arn_is_not_placeholder(self):
        assert not naming.is_lookup_placeholder("arn:aws:acm:us-east-1:123456789012:certificate/x")

    def test_placeholder_arn_is_us_east_1(self):
        arn = naming.placeholder_certificate_arn("123456789012")
        assert arn.startswith("arn:aws:acm:us-east-1:123456789012:certificate/")
