"""Custom exceptions for mlcheck."""

from typing import Optional


class MlcheckError(Exception):
    """Base exception for all mlcheck errors."""

    pass


class MlcheckConfigError(MlcheckError):
    """Raised when configuration is invalid or the pattern fails to compile."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message)
        self.config_key = config_key


class MlcheckParseError(MlcheckError):
    """Raised when a sample file cannot be read."""

    def __init__(self, message: str, file_path: Optional[str] = None):
        super().__init__(message)
        self.file_path = file_path


class MlcheckPipelineError(MlcheckError):
    """Raised when pipeline execution fails."""

    def __init__(self, message: str, stage_name: Optional[str] = None):
        super().__init__(message)
        self.stage_name = stage_name
