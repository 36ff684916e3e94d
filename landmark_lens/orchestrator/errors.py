class LensError(Exception):
    """Base class for every failure raised inside landmark_lens."""


class InvalidInput(LensError):
    """Uploaded file is not an image we can send. Detected locally, no network call."""


class ParseError(LensError):
    """Backend replied but the expected markers were missing."""


class TransportFailure(LensError):
    """Network or model service error."""


class InitializationFailure(LensError):
    """Missing credential or unusable configuration. Fatal at startup."""


class RecognitionFailure(LensError):
    def __init__(self, message: str = "Failed to get information for the landmark in the image."):
        super().__init__(message)


class DirectionsFailure(LensError):
    def __init__(self, message: str = "Failed to generate directions."):
        super().__init__(message)
