"""Exception types raised by the scheduling core and its collaborators."""


class AutomailError(Exception):
    pass


class NotEnoughRobotError(AutomailError, ValueError):
    """Team size of zero or less."""


class UnsupportedTeamSizeError(AutomailError, ValueError):
    """Team size (or the team an item would need) is beyond the largest tier."""


class ItemTooHeavyError(AutomailError, ValueError):
    pass


class InvalidAddItemError(AutomailError, ValueError):
    pass


class InvalidDispatchError(AutomailError, RuntimeError):
    pass


class ExcessiveDeliveryError(AutomailError, RuntimeError):
    """A robot delivered more items in one trip than its hand and tube can hold."""


class MailAlreadyDeliveredError(AutomailError, RuntimeError):
    pass
