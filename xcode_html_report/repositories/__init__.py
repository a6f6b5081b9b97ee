from .bundle_repository import BundleRepository

__all__ = ["BundleRepository"]
