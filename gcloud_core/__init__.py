from .errors import ConfigurationError, GcloudError
from .platform_identity import (
    AppEngineIdentityProvider,
    PlatformIdentityProvider,
    register_identity_provider,
    unregister_identity_provider,
)
from .project_resolver import ProjectResolver, Resolution, resolve_project_id
from .retry_params import RetryParams
from .service_options import ServiceOptions

__all__ = [
    "AppEngineIdentityProvider",
    "ConfigurationError",
    "GcloudError",
    "PlatformIdentityProvider",
    "ProjectResolver",
    "Resolution",
    "RetryParams",
    "ServiceOptions",
    "register_identity_provider",
    "resolve_project_id",
    "unregister_identity_provider",
]
