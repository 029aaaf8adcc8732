from api_doc_builder.builder.route.merger import RouteDocumentationMerger
from api_doc_builder.config import DocumentConfig
from api_doc_builder.data.documentation import Response, RouteDocumentation


def _merge(config, groups, own, protected=False):
    return RouteDocumentationMerger().merge(config, groups, own, protected)


class TestPrecedence:
    def setup_method(self):
        self.config = DocumentConfig(defaults=RouteDocumentation(tags=["public"]))
        self.group = RouteDocumentation(tags=["internal"])

    def test_global_default(self):
        assert _merge(self.config, [], None).tags == ["public"]

    def test_group_overrides_default(self):
        assert _merge(self.config, [self.group], RouteDocumentation()).tags == ["internal"]

    def test_route_overrides_group(self):
        result = _merge(self.config, [self.group], RouteDocumentation(tags=["leaf-only"]))
        assert result.tags == ["leaf-only"]

    def test_nearest_group_wins(self):
        outer = RouteDocumentation(summary="outer", deprecated=True)
        inner = RouteDocumentation(summary="inner")
        result = _merge(DocumentConfig(), [outer, inner], None)
        assert result.summary == "inner"
        assert result.deprecated is True

    def test_responses_merged_by_status_code(self):
        group = RouteDocumentation(responses={"404": Response(description="missing"), "200": Response(description="group")})
        own = RouteDocumentation(responses={"200": Response(description="own")})
        result = _merge(DocumentConfig(), [group], own)
        assert result.responses["200"].description == "own"
        assert result.responses["404"].description == "missing"

    def test_parameters_replace_not_merge(self):
        group = RouteDocumentation(parameters=[{"name": "a", "location": "query", "type": str}])
        own = RouteDocumentation(parameters=[{"name": "b", "location": "query", "type": str}])
        result = _merge(DocumentConfig(), [group], own)
        assert [p.name for p in result.parameters] == ["b"]


class TestSecurityDefaults:
    def test_default_scheme_injected(self):
        config = DocumentConfig(default_security_scheme_name="Auth")
        assert _merge(config, [], RouteDocumentation()).security == ["Auth"]

    def test_explicit_security_kept(self):
        config = DocumentConfig(default_security_scheme_name="Auth")
        assert _merge(config, [], RouteDocumentation(security=["ApiKey"])).security == ["ApiKey"]

    def test_unauthorized_response_injected_for_protected_route(self):
        config = DocumentConfig(
            default_unauthorized_response=Response(description="Username or password invalid."),
            secure_all_routes=False,
        )
        result = _merge(config, [], RouteDocumentation(), protected=True)
        assert result.responses["401"].description == "Username or password invalid."
        assert result.protected is True

    def test_declared_unauthorized_response_wins(self):
        config = DocumentConfig(default_unauthorized_response=Response(description="default"))
        own = RouteDocumentation(responses={"401": Response(description="own")})
        assert _merge(config, [], own, protected=True).responses["401"].description == "own"

    def test_unprotected_route_skipped_when_not_securing_all(self):
        config = DocumentConfig(
            default_security_scheme_name="Auth",
            default_unauthorized_response=Response(description="no"),
            secure_all_routes=False,
        )
        result = _merge(config, [], RouteDocumentation())
        assert result.security is None
        assert result.responses is None

    def test_explicitly_unprotected_route_opts_out(self):
        config = DocumentConfig(default_security_scheme_name="Auth")
        result = _merge(config, [], RouteDocumentation(protected=False))
        assert result.security is None
        assert result.protected is False

    def test_secure_all_routes_marks_route_protected(self):
        config = DocumentConfig(
            default_security_scheme_name="Auth",
            default_unauthorized_response=Response(description="Unauthorized"),
        )
        result = _merge(config, [], RouteDocumentation())
        assert result.security == ["Auth"]
        assert "401" in result.responses
        assert result.protected is True

    def test_unprotected_route_reported_when_not_securing_all(self):
        result = _merge(DocumentConfig(secure_all_routes=False), [], RouteDocumentation())
        assert result.protected is False
