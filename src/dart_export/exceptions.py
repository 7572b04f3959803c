class SourceDirectoryNotFoundError(FileNotFoundError):
    """
    Exception raised when the source directory to export does not exist.

    This is raised before any output is opened, so a failed export never leaves an
    output file behind.

    Attributes:
        directory (str): Path of the missing source directory.

    Example:
        >>> error = SourceDirectoryNotFoundError("lib")
        >>> str(error)
        'The lib directory was not found!'
    """

    def __init__(self, directory: str) -> None:
        """
        Initialize the exception with the missing directory.

        Args:
            directory (str): Path of the missing source directory, as configured.
        """
        self.directory = directory
        super().__init__(f"The {directory} directory was not found!")
