from typing import Optional


class CombinationFailure(Exception):
    """
    raised when one or both pending computations backing an OptionalBuilder
    fail or are cancelled before the builder could be constructed
    """

    def __init__(self, cause: BaseException, msg: Optional[str] = None):
        """
        :param cause: the failure observed on the pending computation
        :param msg: any addition context information
        """
        self.cause = cause
        self.message = msg if msg else "Failed to resolve one or both futures"
        self.message += f"; cause: {cause!r}"

    def __str__(self):
        return repr(self.message)


class ConfigError(Exception):
    """
    errors related to loading the optionalbuilder settings
    """

    def __init__(self, msg):
        self.message = msg

    def __str__(self):
        return repr(self.message)
