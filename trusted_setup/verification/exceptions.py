# trusted_setup/verification/exceptions.py


class ArtifactNotFoundError(FileNotFoundError):
    """Raised when a contribution folder (or a required file in it) does not exist."""


class MalformedFolderNameError(ValueError):
    """Raised for a directory that looks like a contribution but breaks the NNNN_label convention."""

    def __init__(self, folder_name):
        self.folder_name = folder_name
        super().__init__(
            f"Malformed contribution folder name: '{folder_name}' "
            f"(expected four digits, an underscore and a label, e.g. 0001_alice)"
        )


class NoArtifactsError(RuntimeError):
    """A folder with nothing to verify. Handled per folder, never fatal for the chain."""

    def __init__(self, folder_name, extension):
        self.folder_name = folder_name
        super().__init__(f"No {extension} files found in {folder_name}")


class SetupError(RuntimeError):
    """Fatal problem detected before verification starts."""
