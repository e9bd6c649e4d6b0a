"""Bot API objects and their polymorphic families."""

from . import base, chats, files, inline, inputs, markup, messages, payments, permissions, updates
from .base import *  # noqa: F403
from .chats import *  # noqa: F403
from .files import *  # noqa: F403
from .inline import *  # noqa: F403
from .inputs import *  # noqa: F403
from .markup import *  # noqa: F403
from .messages import *  # noqa: F403
from .payments import *  # noqa: F403
from .permissions import *  # noqa: F403
from .updates import *  # noqa: F403

__all__ = [
    *base.__all__,
    *chats.__all__,
    *files.__all__,
    *inline.__all__,
    *inputs.__all__,
    *markup.__all__,
    *messages.__all__,
    *payments.__all__,
    *permissions.__all__,
    *updates.__all__,
]
