from googleapiclient import discovery

from gcloud_core.service_options import ServiceOptions
from gcloud_resourcemanager.service import ResourceManager

CLOUD_PLATFORM_SCOPE = "https://www.googleapis.com/auth/cloud-platform"
DEFAULT_HOST = "https://cloudresourcemanager.googleapis.com"


def _build_resource_manager_rpc(options):
    return discovery.build(
        "cloudresourcemanager", "v1", credentials=options.credentials, cache_discovery=False
    )


class ResourceManagerOptions(ServiceOptions):
    """Options for Cloud Resource Manager, which works without a project ID."""

    def project_id_required(self):
        return False

    def default_host(self):
        return DEFAULT_HOST

    def scopes(self):
        return (CLOUD_PLATFORM_SCOPE,)

    def default_service_factory(self):
        return ResourceManager

    def default_rpc_factory(self):
        return _build_resource_manager_rpc
