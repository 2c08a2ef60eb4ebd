"""
NeuroAI Run Package

This package contains the configuration, logging and trial execution framework.

Exported Classes:
    Config: Parameters of an evolutionary run, parsed from an INI file
    Trial:  Abstract base class for one evolutionary run

Exported Functions:
    setup_logger: Route the package log records to the console and, optionally, a file
"""

from neuroai.run.config import Config
from neuroai.run.log    import setup_logger
from neuroai.run.trial  import Trial

__all__ = [
    'Config',
    'Trial',
    'setup_logger',
]
