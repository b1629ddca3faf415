## command_exceptions.py


class CommandError(Exception):
    """
    Exception raised by MindatCommands. It carries only the display string shown to the user;
    diagnostics are written to the debug log instead.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"message": self.message}
