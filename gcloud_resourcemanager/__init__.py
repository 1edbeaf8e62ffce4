from .options import CLOUD_PLATFORM_SCOPE, ResourceManagerOptions
from .service import ResourceManager

__all__ = ["CLOUD_PLATFORM_SCOPE", "ResourceManager", "ResourceManagerOptions"]
