from api_doc_builder.builder.openapi.common import compact
from api_doc_builder.config import AuthType, SecurityScheme


class SecuritySchemesBuilder:
    def build(self, schemes: list[SecurityScheme]) -> dict[str, dict]:
        return {scheme.name: self.build_scheme(scheme) for scheme in schemes}

    def build_scheme(self, scheme: SecurityScheme) -> dict:
        result = {
            "type": scheme.type.value,
            "description": scheme.description,
        }
        if scheme.type is AuthType.API_KEY:
            result["name"] = scheme.key_name
            result["in"] = scheme.location.value if scheme.location else None
        elif scheme.type is AuthType.HTTP:
            result["scheme"] = scheme.scheme
            result["bearerFormat"] = scheme.bearer_format
        elif scheme.type is AuthType.OAUTH2:
            result["flows"] = scheme.flows
        elif scheme.type is AuthType.OPENID_CONNECT:
            result["openIdConnectUrl"] = scheme.open_id_connect_url
        return compact(result)


def security_requirements(scheme_names: list[str] | None) -> list[dict] | None:
    """One requirement object per scheme; any one of them satisfies the route."""
    if scheme_names is None:
        return None
    return [{name: []} for name in scheme_names]
