from .content_filter import ContentFilter
from .domain_objects import Candidate, ScanConfiguration
from .file_discovery_service import FileDiscoveryService

__all__ = [
    "Candidate",
    "ContentFilter",
    "FileDiscoveryService",
    "ScanConfiguration",
]
