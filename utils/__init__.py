"""
utils/
------
Cross-cutting helpers.

    from utils.logging import setup_logging, get_logger
"""
