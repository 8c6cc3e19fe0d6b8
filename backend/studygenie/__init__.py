"""StudyGenie backend - AI breakdowns of uploaded study material."""

__version__ = "1.0.0"
