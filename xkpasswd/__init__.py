# xkpasswd
# (memorable passphrase generator)
#

from .errors import (XkPasswdError, InvalidConfiguration,
                     EmptyCandidateSet, WordSourceUnavailable)
from .options import Padding, CaseTransform, CharChoice
from .config import Configuration
from .pwgen import XkPasswd, generate_passphrase

__all__ = (
    'XkPasswd', 'Configuration', 'generate_passphrase',
    'Padding', 'CaseTransform', 'CharChoice',
    'XkPasswdError', 'InvalidConfiguration',
    'EmptyCandidateSet', 'WordSourceUnavailable',
)
