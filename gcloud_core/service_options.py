import logging
import time
from importlib import metadata

from gcloud_core import factories
from gcloud_core.credentials import default_credentials
from gcloud_core.errors import ConfigurationError
from gcloud_core.project_resolver import ProjectResolver
from gcloud_core.retry_params import RetryParams

LOGGER = logging.getLogger(__name__)

DEFAULT_HOST = "https://www.googleapis.com"
DISTRIBUTION_NAME = "gcloud-python-core"
LIBRARY_NAME = "gcloud-python"


def _library_version():
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return None


LIBRARY_VERSION = _library_version()
APPLICATION_NAME = LIBRARY_NAME if LIBRARY_VERSION is None else f"{LIBRARY_NAME}/{LIBRARY_VERSION}"


class ServiceOptions:
    """Base configuration shared by every service.

    Subclasses provide the service's OAuth scopes and default factories and
    may relax the project ID requirement by overriding
    :meth:`project_id_required`.

    Args:
        project_id: explicit project ID. When omitted it is resolved once
            from the environment (see :mod:`gcloud_core.project_resolver`).
        host: service endpoint, defaults to :meth:`default_host`.
        credentials: ``google.auth`` credentials. Application default
            credentials are looked up on first access when omitted.
        retry_params: a :class:`RetryParams`, defaults to
            :meth:`default_retry_params`.
        service_factory: callable building the service from the options.
        rpc_factory: callable building the RPC client from the options.
        clock: callable returning the current time in seconds.
        project_resolver: resolver used when ``project_id`` is omitted.

    Raises:
        ConfigurationError: the service needs a project ID and none was
            given or found.
    """

    def __init__(
        self,
        project_id=None,
        host=None,
        credentials=None,
        retry_params=None,
        service_factory=None,
        rpc_factory=None,
        clock=None,
        project_resolver=None,
    ):
        if project_id is None:
            resolver = project_resolver or ProjectResolver()
            project_id = resolver.resolve_project_id()
        if project_id is None and self.project_id_required():
            raise ConfigurationError(
                "A project ID is required for this service but could not be determined "
                "from the options or the environment. Please pass project_id explicitly."
            )
        self._project_id = project_id
        self._host = host or self.default_host()
        self._credentials = credentials
        self._credentials_looked_up = credentials is not None
        self._retry_params = retry_params or self.default_retry_params()
        self._service_factory = (
            service_factory
            or factories.service_factory_for(type(self))
            or self.default_service_factory()
        )
        self._rpc_factory = (
            rpc_factory
            or factories.rpc_factory_for(type(self))
            or self.default_rpc_factory()
        )
        self._clock = clock or time.time
        self._service = None
        self._rpc = None

    def project_id_required(self) -> bool:
        return True

    def default_host(self) -> str:
        return DEFAULT_HOST

    def default_retry_params(self) -> RetryParams:
        """Override when the service's SLA calls for different backoff."""
        return RetryParams.default_instance()

    def default_service_factory(self):
        raise NotImplementedError

    def default_rpc_factory(self):
        raise NotImplementedError

    def scopes(self):
        raise NotImplementedError

    @property
    def project_id(self):
        """The project ID; may be None for services that do not require one."""
        return self._project_id

    @property
    def host(self):
        return self._host

    @property
    def credentials(self):
        if not self._credentials_looked_up:
            self._credentials_looked_up = True
            self._credentials = default_credentials(scopes=list(self.scopes()))
            if self._credentials is None:
                LOGGER.warning("No credentials found for %s", type(self).__name__)
        return self._credentials

    @property
    def retry_params(self):
        return self._retry_params

    @property
    def clock(self):
        return self._clock

    @property
    def service_factory(self):
        return self._service_factory

    @property
    def rpc_factory(self):
        return self._rpc_factory

    @property
    def application_name(self):
        return APPLICATION_NAME

    @property
    def library_name(self):
        return LIBRARY_NAME

    @property
    def library_version(self):
        return LIBRARY_VERSION

    def service(self):
        if self._service is None:
            self._service = self._service_factory(self)
        return self._service

    def rpc(self):
        if self._rpc is None:
            self._rpc = self._rpc_factory(self)
        return self._rpc

    def replace(self, **changes):
        """Return a copy of these options with the given fields changed."""
        fields = {
            "project_id": self._project_id,
            "host": self._host,
            "credentials": self._credentials,
            "retry_params": self._retry_params,
            "service_factory": self._service_factory,
            "rpc_factory": self._rpc_factory,
            "clock": self._clock,
        }
        unknown = set(changes) - set(fields)
        if unknown:
            raise TypeError(f"Unknown option(s): {', '.join(sorted(unknown))}")
        fields.update(changes)
        return type(self)(**fields)

    def _key(self):
        return (
            self._project_id,
            self._host,
            self._retry_params,
            _factory_type(self._service_factory),
            _factory_type(self._rpc_factory),
            self._clock,
        )

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash((type(self),) + self._key())

    def __repr__(self):
        return f"{type(self).__name__}(project_id={self._project_id!r}, host={self._host!r})"

    def __getstate__(self):
        state = self.__dict__.copy()
        state["_service"] = None
        state["_rpc"] = None
        return state


def _factory_type(factory):
    # Plain functions compare by identity, factory instances by their class.
    return factory if hasattr(factory, "__name__") else type(factory)
