# app/services - Business logic layer
from .provider import GeminiMoleculeProvider, SampleMoleculeProvider, ProviderError, default_provider
from .molecule_service import MoleculeService, RequestGate
from .export_service import ExportService

__all__ = [
    'GeminiMoleculeProvider',
    'SampleMoleculeProvider',
    'ProviderError',
    'default_provider',
    'MoleculeService',
    'RequestGate',
    'ExportService',
]
