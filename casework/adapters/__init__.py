"""Adapters for the Casework execution engine.

This package holds the concrete implementations of the core port
interfaces: how metadata is read, how methods are called, where
candidates come from and where outcomes go.

Adapter Organization:

- metadata/: Trait lookup and method enumeration (TraitRegistry)
- invocation/: Method calls (DispatchTable, ReflectiveInvoker)
- discovery/: Candidate pools built from importable modules
- listener/: Result listeners (logging)
"""
