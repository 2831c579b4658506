# Import all models so Base.metadata sees every table.
from .conversation import Conversation
from .message import Message
