"""Exception types raised by the solver on bad input or an unusable word list."""


class HintError(ValueError):
    """Base class for every solver input error."""


class InputLengthMismatch(HintError):
    """A guess, feedback string or seed letter has the wrong length."""


class InvalidCharacter(HintError):
    """A word holds a non a-z letter, or a feedback code is not recognized."""


class DictionaryLoadFailure(HintError):
    """The word list could not be read or produced no usable words."""
