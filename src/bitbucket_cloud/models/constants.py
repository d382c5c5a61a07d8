"""Default values shared by the Bitbucket models."""

EMPTY_STRING = ""
UNKNOWN = "Unknown"
NONE_VALUE = "None"
