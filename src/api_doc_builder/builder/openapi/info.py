from api_doc_builder.builder.openapi.common import compact
from api_doc_builder.config import Contact, Info, License


class InfoBuilder:
    def build(self, info: Info) -> dict:
        return compact({
            "title": info.title,
            "version": info.version,
            "summary": info.summary,
            "description": info.description,
            "termsOfService": info.terms_of_service,
            "contact": self._contact(info.contact),
            "license": self._license(info.license),
        })

    def _contact(self, contact: Contact | None) -> dict | None:
        if contact is None:
            return None
        return compact({"name": contact.name, "url": contact.url, "email": contact.email})

    def _license(self, license_info: License | None) -> dict | None:
        if license_info is None:
            return None
        # OpenAPI allows either a url or an SPDX identifier, not both.
        return compact({
            "name": license_info.name,
            "identifier": license_info.identifier,
            "url": None if license_info.identifier else license_info.url,
        })
