"""Discovery adapters that build the candidate type pool."""

from .modules import ModuleCandidateSource, classes_defined_in

__all__ = ["ModuleCandidateSource", "classes_defined_in"]
