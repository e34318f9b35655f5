class InvalidFileName(Exception):
    def __init__(self, raw_name: str):
        self.raw_name = raw_name
        super().__init__(f"Invalid filename: {raw_name}")


class FailedToSaveFile(Exception):
    """Raised when the storage backend cannot write an uploaded file."""
    pass
