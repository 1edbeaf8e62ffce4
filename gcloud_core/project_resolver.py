"""Discovery of the implicit Google Cloud project ID.

When no project ID is passed explicitly, the following sources are probed in
order and the first one that yields a value wins:

1. the ``GCLOUD_PROJECT`` property, then the environment variable of the same name
2. the registered managed-platform identity provider
3. the service account key named by ``GOOGLE_APPLICATION_CREDENTIALS``
4. the active Cloud SDK (gcloud) configuration
5. the Compute Engine metadata server

Each probe is speculative: a missing file, a parse error or an unreachable
server only means that source has nothing to offer.
"""
import json
import logging
import os
import re
import sys
from collections import namedtuple
from http.client import HTTPException
from pathlib import Path
from urllib import request

from google.auth import environment_vars

from gcloud_core import platform_identity

LOGGER = logging.getLogger(__name__)

PROJECT_ENV_NAME = environment_vars.LEGACY_PROJECT
CREDENTIALS_ENV_NAME = environment_vars.CREDENTIALS
CLOUDSDK_CONFIG_ENV_NAME = environment_vars.CLOUD_SDK_CONFIG_DIR
APPDATA_ENV_NAME = "APPDATA"

DEFAULT_CONFIG_NAME = "default"
DEFAULT_METADATA_TIMEOUT = 1.0

_METADATA_PROJECT_URL = "http://metadata/computeMetadata/v1/project/project-id"
_METADATA_HEADERS = {"X-Google-Metadata-Request": "True"}

_SECTION_PATTERN = re.compile(r"^\[(.*)\]$")
_PROJECT_PATTERN = re.compile(r"^project\s*=\s*(.*)$")

SOURCE_ENVIRONMENT = "environment"
SOURCE_PLATFORM = "platform_identity"
SOURCE_SERVICE_ACCOUNT = "service_account"
SOURCE_CLOUD_SDK = "cloud_sdk"
SOURCE_METADATA = "metadata_server"

Resolution = namedtuple("Resolution", ["project_id", "source"])


def _normalize_project_id(value):
    if not value or not isinstance(value, str):
        return None
    cleaned = value.strip().strip("'\"")
    return cleaned or None


class ProjectResolver:
    """Resolves a project ID from the ambient environment.

    All collaborators default to the real process environment; pass them in
    to probe a different one.
    """

    def __init__(
        self,
        environ=None,
        properties=None,
        identity_provider=None,
        home=None,
        is_windows=None,
        urlopen=None,
        metadata_timeout: float = DEFAULT_METADATA_TIMEOUT,
    ):
        self._environ = os.environ if environ is None else environ
        self._properties = properties or {}
        self._identity_provider = identity_provider
        self._home = home
        self._is_windows = sys.platform.startswith("win") if is_windows is None else is_windows
        # Metadata requests must not go through a proxy.
        self._urlopen = urlopen or request.build_opener(request.ProxyHandler({})).open
        self.metadata_timeout = metadata_timeout

    def resolve_project_id(self):
        return self.resolve_with_source().project_id

    def resolve_with_source(self) -> Resolution:
        strategies = (
            (SOURCE_ENVIRONMENT, self.environment_project_id),
            (SOURCE_PLATFORM, self.platform_project_id),
            (SOURCE_SERVICE_ACCOUNT, self.service_account_project_id),
            (SOURCE_CLOUD_SDK, self.cloud_sdk_project_id),
            (SOURCE_METADATA, self.metadata_project_id),
        )
        for source, strategy in strategies:
            project_id = strategy()
            if project_id:
                LOGGER.info("Resolved project ID %r from %s", project_id, source)
                return Resolution(project_id, source)
            LOGGER.debug("No project ID from %s", source)
        return Resolution(None, None)

    def environment_project_id(self):
        return _normalize_project_id(
            self._properties.get(PROJECT_ENV_NAME)
        ) or _normalize_project_id(self._environ.get(PROJECT_ENV_NAME))

    def platform_project_id(self):
        provider = self._identity_provider or platform_identity.get_identity_provider()
        if provider is None:
            return None
        try:
            account = provider.service_account_name()
        except Exception as exc:
            # Providers wrap SDKs we do not control; any failure means no identity.
            LOGGER.debug("Platform identity lookup failed: %s", exc)
            return None
        if not isinstance(account, str) or "@" not in account:
            return None
        return _normalize_project_id(account.split("@", 1)[0])

    def service_account_project_id(self):
        credentials_path = self._environ.get(CREDENTIALS_ENV_NAME)
        if not credentials_path:
            return None
        try:
            with open(credentials_path, encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as exc:
            LOGGER.debug("Unable to read credentials file %s: %s", credentials_path, exc)
            return None
        if not isinstance(data, dict):
            return None
        return _normalize_project_id(data.get("project_id"))

    def config_directory(self) -> Path:
        override = self._environ.get(CLOUDSDK_CONFIG_ENV_NAME)
        if override:
            return Path(override)
        appdata = self._environ.get(APPDATA_ENV_NAME)
        if self._is_windows and appdata:
            return Path(appdata) / "gcloud"
        home = Path(self._home) if self._home is not None else Path.home()
        return home / ".config" / "gcloud"

    def active_config_name(self, config_dir: Path) -> str:
        try:
            with open(config_dir / "active_config", encoding="utf-8") as fh:
                name = fh.readline().strip()
        except (OSError, UnicodeDecodeError):
            return DEFAULT_CONFIG_NAME
        return name or DEFAULT_CONFIG_NAME

    def cloud_sdk_project_id(self):
        config_dir = self.config_directory()
        active_config = self.active_config_name(config_dir)
        candidates = (
            config_dir / "configurations" / f"config_{active_config}",
            config_dir / "properties",
        )
        for path in candidates:
            try:
                fh = open(path, encoding="utf-8")
            except OSError:
                continue
            try:
                with fh:
                    return _project_from_config_lines(fh)
            except (OSError, UnicodeDecodeError) as exc:
                LOGGER.debug("Unable to read Cloud SDK config %s: %s", path, exc)
                return None
        return None

    def metadata_project_id(self):
        req = request.Request(_METADATA_PROJECT_URL, headers=_METADATA_HEADERS)
        try:
            with self._urlopen(req, timeout=self.metadata_timeout) as resp:
                if resp.status != 200:
                    return None
                line = resp.readline()
        except (OSError, HTTPException, ValueError) as exc:
            # URLError, HTTPError and socket timeouts are all OSError.
            LOGGER.debug("Metadata server probe failed: %s", exc)
            return None
        if isinstance(line, bytes):
            line = line.decode("utf-8", errors="replace")
        return _normalize_project_id(line)


def _project_from_config_lines(lines):
    # Only the first match counts. An empty value yields None, so resolution
    # moves on to the metadata server.
    section = None
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line or line.startswith(";"):
            continue
        line = line.strip()
        match = _SECTION_PATTERN.match(line)
        if match:
            section = match.group(1)
        elif section is None or section == "core":
            match = _PROJECT_PATTERN.match(line)
            if match:
                return _normalize_project_id(match.group(1))
    return None


def resolve_project_id(**kwargs):
    return ProjectResolver(**kwargs).resolve_project_id()
