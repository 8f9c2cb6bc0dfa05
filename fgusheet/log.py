"""
Logging configuration
"""
import logging
import sys


def setup_logging(level="INFO"):
    """Setup application logging"""

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # avoid stacking handlers when called twice (CLI then server)
    if not any(getattr(h, '_fgusheet', False) for h in root_logger.handlers):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        console_handler._fgusheet = True
        root_logger.addHandler(console_handler)

    # Werkzeug logs every request at INFO
    logging.getLogger('werkzeug').setLevel(logging.WARNING)

    app_logger = logging.getLogger('fgusheet')
    app_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return app_logger
