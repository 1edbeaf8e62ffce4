import logging

import google.auth
from google.auth import app_engine
from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account

from gcloud_core.platform_identity import app_engine_app_id

LOGGER = logging.getLogger(__name__)


def default_credentials(scopes=None):
    """Return ambient credentials, or None when none can be found."""
    if app_engine_app_id() is not None:
        try:
            return app_engine.Credentials(scopes=scopes)
        except (EnvironmentError, GoogleAuthError) as exc:
            # Maybe not on the first generation App Engine runtime.
            LOGGER.debug("App Engine credentials unavailable: %s", exc)

    try:
        credentials, _ = google.auth.default(scopes=scopes)
    except GoogleAuthError as exc:
        LOGGER.debug("Application default credentials unavailable: %s", exc)
        return None
    return credentials


def credentials_from_file(path, scopes=None):
    return service_account.Credentials.from_service_account_file(path, scopes=scopes)
