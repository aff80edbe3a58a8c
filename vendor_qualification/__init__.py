"""
Vendor Qualification: rules and registry engine for a four-circuit
vendor-qualification contract.

Evaluates threshold and compliance predicates, keeps the in-memory registry of
qualified vendor ids, and answers every call with a uniform response envelope.
The HTTP API and CLI are thin layers over the engine.
"""

__version__ = "0.1.0"
