"""
Application errors

Expected outcomes (missing patient, unsharable file) are not exceptions;
these cover unexpected failures only.
"""


class StorageError(Exception):
    """Backing document could not be read or written"""

    def __init__(self, path, message: str):
        self.path = str(path)
        super().__init__(f"{message}: {self.path}")


class DiagnosisError(Exception):
    """Diagnosis assistant call failed or returned an invalid payload"""
