class CommandFailedError(RuntimeError):
    """
    An external command exited with a nonzero code.
    """

    def __init__(self, command: str, exit_code: int) -> None:
        super().__init__('Command "%s" has failed with exit code %d.' % (command, exit_code))
        self.command = command
        self.exit_code = exit_code
