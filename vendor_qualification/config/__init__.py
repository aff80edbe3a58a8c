"""
Configuration package: environment and .env loading for the engine,
API server and CLI.
"""

from vendor_qualification.config.env import (
    get_backend_kind,
    get_contract_address,
    get_contract_call_timeout,
    get_contract_deployed_at,
    get_contract_gateway_url,
    get_network,
    is_debug_enabled,
    load_qualification_env,
)

__all__ = [
    "get_backend_kind",
    "get_contract_address",
    "get_contract_call_timeout",
    "get_contract_deployed_at",
    "get_contract_gateway_url",
    "get_network",
    "is_debug_enabled",
    "load_qualification_env",
]
