# errors
# (exceptions raised by the generator)
#


class XkPasswdError(RuntimeError):

    def __init__(self, msg):
        RuntimeError.__init__(self, msg)


class InvalidConfiguration(XkPasswdError, ValueError):

    """Configuration field was set to a value out of its range."""

    def __init__(self, field, value, msg):
        XkPasswdError.__init__(self, f"{field}={value!r}: {msg}")
        self.field = field
        self.value = value


class EmptyCandidateSet(XkPasswdError):

    """No word in the word list fits the configured length bounds."""


class WordSourceUnavailable(XkPasswdError):

    """The word list file or bundled resource cannot be read."""
