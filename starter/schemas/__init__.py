from .payment import (
    PaymentIntentCreateRequest,
    PaymentIntentCreateResponse,
    ErrorResponse
)
from .conversation import (
    ConversationBase,
    ConversationCreate,
    Conversation
)
from .message import (
    ChatRole,
    MessageBase,
    MessageCreate,
    MessageCreateInternal,
    Message
)
