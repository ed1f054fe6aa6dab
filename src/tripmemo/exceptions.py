# src/tripmemo/exceptions.py


class TripMemoError(Exception):
    """Base class for every exception raised by tripmemo."""

    pass


class InputFileMissingError(TripMemoError):
    """Raised when the photo sheet does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Photo sheet does not exist: {path}")


class MissingColumnsError(TripMemoError, ValueError):
    """Raised when the photo sheet lacks the columns needed to build photo records."""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(
            f"Missing critical columns in sheet: {', '.join(self.missing)}. "
            "Make sure to include columns for 'Id' (or 'File') and 'Date'."
        )


class NoTimestampedPhotosError(TripMemoError):
    """Raised when a trip cannot be assembled because no photo carries a timestamp."""

    def __init__(self, total_photos=0):
        self.total_photos = total_photos
        super().__init__(
            f"None of the {total_photos} photos has a valid timestamp; "
            "a trip needs at least one dated photo."
        )


class UnknownAchievementTypeError(TripMemoError, KeyError):
    """Raised when an achievement type is not part of the catalog."""

    def __init__(self, achievement_type):
        self.achievement_type = achievement_type
        super().__init__(f"Unknown achievement type: {achievement_type!r}")

    def __str__(self):
        return self.args[0]


class InvalidSheetError(TripMemoError):
    """Raised when the photo sheet is not a readable .xlsx workbook."""

    def __init__(self, path, reason=""):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not open photo sheet {path}: {reason or 'not a valid .xlsx workbook'}")
