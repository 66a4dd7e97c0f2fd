"""Exceptions raised by the bizops service layer."""


class BizOpsError(Exception):
    """Base exception for bizops errors"""
    status_code = 500


class ValidationError(BizOpsError):
    """Caller supplied missing or invalid input; nothing was written"""
    status_code = 400


class ConfirmationError(ValidationError):
    """Destructive operation attempted without the exact confirmation token"""
    pass


class StorageError(BizOpsError):
    """Underlying database operation failed"""
    pass


class BackupError(StorageError):
    """Database snapshot could not be copied"""
    pass
