"""
Custom exceptions for wordgen.
"""

class WordgenError(Exception):
    """Base exception for wordgen errors"""
    pass


class ConfigError(WordgenError):
    """Invalid configuration or command-line input"""
    pass


class TableLoadError(WordgenError):
    """Translation table could not be read or is malformed"""
    pass


class WorkerError(WordgenError):
    """A combination worker failed or could not be started"""
    pass
