"""
Shared Kernel

Base value objects and infrastructure shared across all domain apps:
the document store client that feeds live queries lives here so that
apps receive it as an injected dependency instead of a global handle.
"""
