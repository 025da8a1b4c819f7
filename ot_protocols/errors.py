class OTError(Exception):
    pass


class InvalidChoice(OTError, ValueError):
    def __init__(self, choice):
        super().__init__("Choice must be 0 or 1, got %r" % (choice,))
        self.choice = choice


class MessagesNotSet(OTError):
    def __init__(self, message="Messages not set"):
        super().__init__(message)


class NoMessagesSet(OTError):
    def __init__(self, message="No messages set"):
        super().__init__(message)


class ChoiceCountMismatch(OTError, ValueError):
    def __init__(self, num_choices, num_pairs):
        super().__init__(
            "Number of choices must match number of message pairs "
            "(%d choices, %d pairs)" % (num_choices, num_pairs))
        self.num_choices = num_choices
        self.num_pairs = num_pairs


class InvalidInverse(OTError, ZeroDivisionError):
    def __init__(self, value, modulus):
        super().__init__("%d has no inverse mod %d" % (value, modulus))


class ProtocolStateError(OTError):
    pass
