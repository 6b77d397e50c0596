"""Request-terminating errors raised while handling an interaction.

Every error here aborts the current request and is rendered as an HTTP 500
with the message as a plain-text body. Delivery failures during a broadcast
are not represented here: they are logged and never leave the handler.
"""


class InteractionError(Exception):
    """Base class for errors that reject an inbound interaction."""


class InvalidMethodError(InteractionError):
    """Inbound request was not a POST."""

    def __init__(self, method: str = ""):
        super().__init__("Expected POST request")
        self.method = method


class InvalidSignatureError(InteractionError):
    """Signature or timestamp header missing, or signature does not verify."""

    def __init__(self):
        super().__init__("Invalid signature")


class MalformedInteractionError(InteractionError):
    """Verified body could not be decoded into an interaction."""


class UnknownInteractionTypeError(InteractionError):
    """Interaction type, or command data type, is not one we handle."""

    def __init__(self, interaction_type):
        super().__init__(f'invalid interaction type "{interaction_type}"')
        self.interaction_type = interaction_type


class UnknownCommandError(InteractionError):
    """Command name is not registered for its command type."""

    def __init__(self, kind: str, name: str):
        super().__init__(f'invalid {kind} "{name}"')
        self.kind = kind
        self.name = name


class MissingOptionError(InteractionError):
    """A required command option is absent from the payload."""

    def __init__(self, name: str):
        super().__init__(f'missing required option "{name}"')
        self.name = name
