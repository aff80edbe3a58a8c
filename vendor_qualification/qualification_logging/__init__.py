"""
Structured logging for Vendor Qualification.

JSON logs with timestamp, event_type, method, vendor_id.
Use get_logger() in all modules for aggregation-friendly output.
"""

from vendor_qualification.qualification_logging.logger import bind_vendor, get_logger

__all__ = ["bind_vendor", "get_logger"]
