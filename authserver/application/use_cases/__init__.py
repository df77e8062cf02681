# authserver/application/use_cases/__init__.py

"""
Application service module.

This package contains the application services that orchestrate the
domain, organized according to functional domains.
"""

from authserver.application.use_cases.client_authentication_use_cases import ClientAuthenticationService

__all__ = [
    "ClientAuthenticationService",
]
