class GcloudError(Exception):
    """Base class for errors raised by the gcloud client libraries."""


class ConfigurationError(GcloudError):
    """Raised when service options cannot be built from the given settings."""
