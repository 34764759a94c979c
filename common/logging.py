import logging


class CountingHandler(logging.Handler):
    """Count warnings and errors emitted while the handler is attached."""

    def __init__(self, level: int = logging.WARNING):
        super().__init__(level)
        self.warnings = 0
        self.errors = 0

    def emit(self, record):
        if record.levelno >= logging.ERROR:
            self.errors += 1
        elif record.levelno >= logging.WARNING:
            self.warnings += 1

    @property
    def has_errors(self) -> bool:
        return self.errors > 0
