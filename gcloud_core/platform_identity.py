"""Registration point for managed-platform identity services.

A hosting environment that exposes an ambient identity (App Engine, for
example) registers a provider at startup. The project resolver asks the
registered provider for its service account name and treats an absent
provider the same as one that fails.
"""
import logging
import os
import threading

LOGGER = logging.getLogger(__name__)

_LOCK = threading.Lock()
_PROVIDER = None


class PlatformIdentityProvider:
    """Interface for an ambient identity service."""

    def service_account_name(self) -> str:
        raise NotImplementedError


class AppEngineIdentityProvider(PlatformIdentityProvider):
    """Identity provider backed by the App Engine bundled services SDK.

    Install the ``appengine`` extra to make it usable.
    """

    def service_account_name(self) -> str:
        from google.appengine.api import app_identity

        return app_identity.get_service_account_name()


def register_identity_provider(provider):
    global _PROVIDER
    with _LOCK:
        _PROVIDER = provider
    LOGGER.debug("Registered platform identity provider %r", provider)


def unregister_identity_provider():
    global _PROVIDER
    with _LOCK:
        _PROVIDER = None


def get_identity_provider():
    return _PROVIDER


def app_engine_app_id(environ=None):
    env = os.environ if environ is None else environ
    for name in ("GAE_APPLICATION", "APPLICATION_ID"):
        value = env.get(name)
        if value:
            return value
    return None
