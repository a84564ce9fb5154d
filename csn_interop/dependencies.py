"""
Service factories.

Provides cached default instances of the bundle provider and the interop
service, configured from the package settings.
"""

from functools import lru_cache

from csn_interop.config import get_settings
from csn_interop.services.bundles import FolderBundleProvider
from csn_interop.services.interop import InteropService


@lru_cache
def get_bundle_provider() -> FolderBundleProvider:
    """Get cached bundle provider instance."""
    settings = get_settings()
    return FolderBundleProvider(
        project_root=settings.project_root,
        folders=settings.i18n_folders,
        basename=settings.i18n_basename,
    )


@lru_cache
def get_interop_service() -> InteropService:
    """Get cached interop service instance."""
    return InteropService(bundles=get_bundle_provider())
