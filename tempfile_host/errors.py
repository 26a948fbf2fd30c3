"""Errors that end a tempfile-host run. Every one maps to exit status 1."""


class TempfileHostError(Exception):
    """Base class for fatal run errors."""


class UsageError(TempfileHostError):
    """No file argument and nothing piped on stdin."""

    def __str__(self):
        return 'No input. Provide a file path or pipe data via stdin.'


class FileNotFound(TempfileHostError):
    """The file argument does not name an existing regular file."""

    def __init__(self, path):
        super().__init__(path)
        self.path = path

    def __str__(self):
        return f"File '{self.path}' not found."


class OversizeInput(TempfileHostError):
    """Input is larger than the service accepts."""

    def __init__(self, size, limit):
        super().__init__(size, limit)
        self.size = size
        self.limit = limit

    def __str__(self):
        size_mb = self.size // 1024 // 1024
        limit_mb = self.limit // 1024 // 1024
        return f'File is too large ({size_mb} MiB). The limit is {limit_mb} MiB.'


class UploadTransportError(TempfileHostError):
    """The request failed before a response body was received."""


class UploadRejected(TempfileHostError):
    """The server answered with something that is not a link."""

    def __init__(self, body):
        super().__init__(body)
        self.body = body

    def __str__(self):
        return f'Upload failed. Server response: {self.body.rstrip()}'


class HistoryWriteError(TempfileHostError):
    """The history log could not be appended to."""
